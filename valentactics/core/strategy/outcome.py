"""성공 타입 판정

단일 대상 표와 배치 표는 입력도 임계값도 다르다. 서로 섞지 않는다.
우선순위 순서대로 평가, 첫 일치가 결과.
"""

from valentactics.core.strategy.models import (
    BatchOutcomeType,
    BatchPriorScores,
    BenefitType,
    OutcomeType,
    RelationshipGoal,
    TargetProfile,
)
from valentactics.core.strategy.scoring import BATCH_INVEST_AMOUNT


def determine_outcome(
    benefit_type: BenefitType,
    roi: int,
    intimacy: int,
    emotional_priority: int,
    goal: RelationshipGoal,
) -> OutcomeType:
    """단일 대상 모드 성공 타입."""
    if goal == RelationshipGoal.DISTANCE and emotional_priority <= 2:
        return OutcomeType.CUT_LOSS
    if benefit_type == BenefitType.TANGIBLE and roi >= 60 and emotional_priority >= 4:
        return OutcomeType.FULL_SUCCESS
    if benefit_type == BenefitType.TANGIBLE and roi >= 50:
        return OutcomeType.INVESTMENT
    if benefit_type == BenefitType.INTANGIBLE and emotional_priority >= 4:
        return OutcomeType.EMOTIONAL
    if benefit_type == BenefitType.INTANGIBLE and intimacy >= 50:
        return OutcomeType.RELATIONSHIP_BUILDING
    if emotional_priority >= 4:
        return OutcomeType.EMOTIONAL
    return OutcomeType.NEEDS_REVIEW


def determine_batch_outcome(
    profile: TargetProfile, scores: BatchPriorScores
) -> BatchOutcomeType:
    """배치 모드 성공 타입. 관계성 점수와 답례 배율을 쓴다."""
    has_return = profile.received_return
    return_value = profile.return_value or 0
    multiplier = return_value / BATCH_INVEST_AMOUNT if return_value > 0 else 0
    ep = profile.emotional_priority

    if ep >= 4 and has_return:
        return BatchOutcomeType.FULL_SUCCESS
    if ep >= 4:
        return BatchOutcomeType.EMOTIONAL_SUCCESS
    if has_return and multiplier >= 1.0:
        return BatchOutcomeType.INVESTMENT_SUCCESS
    if profile.relationship_goal == RelationshipGoal.DEEPEN and scores.relationship >= 70:
        return BatchOutcomeType.RELATIONSHIP_BUILDING_SUCCESS
    if ep == 3 and not has_return:
        return BatchOutcomeType.NEEDS_REVISION
    if ep <= 2 and not has_return:
        return BatchOutcomeType.CUT_LOSS
    return BatchOutcomeType.NEEDS_REVISION
