"""리스크 경고

단일 대상 경고와 배치 경고 목록은 본명 오해 조건이 다르다:
- 단일 대상: giri 인식만으로 경고 (warns_romance_misread)
- 배치 목록: 추가로 ep<=2 필요 (warns_low_priority_romance_misread)
두 조건을 각각 독립 판정 함수로 둔다.
"""

from typing import List, Sequence

from valentactics.core.strategy.models import (
    AnalyzedTarget,
    BatchOutcomeType,
    BenefitType,
    GiriAwareness,
    Rank,
    RelationshipGoal,
    TargetProfile,
)

ROMANCE_MISREAD_WARNING = (
    "義理のつもりでも本命と誤解されるリスクがあります。渡し方やメッセージに注意してください。"
)
TWO_YEAR_NO_RETURN_WARNING = (
    "2年連続でお返しがありません。今年の投資は最小限に抑えるか、見送りを検討してください。"
)
LOW_ROI_WARNING = "ROIスコアが低く、有形リターンはほぼ期待できません。予算を抑えることをお勧めします。"
DISTANCE_GOAL_WARNING = "距離を置きたい相手にギフトを渡す必要があるか、再検討をお勧めします。"
LOW_PRIORITY_HIGH_BUDGET_WARNING = (
    "感情的重要度が低い相手への高額投資です。コスト対効果を再考してみてください。"
)

LOW_ROI_THRESHOLD = 30
HIGH_BUDGET_THRESHOLD = 3000


# ── 판정 함수 ──


def warns_romance_misread(profile: TargetProfile) -> bool:
    """단일 대상 경고 조건: 본명 오해 가능성 (무조건)."""
    return profile.giri_awareness == GiriAwareness.MAY_SEEM_ROMANTIC


def warns_low_priority_romance_misread(profile: TargetProfile) -> bool:
    """배치 경고 목록 조건: 본명 오해 가능성 + ep<=2."""
    return warns_romance_misread(profile) and profile.emotional_priority <= 2


def has_two_years_without_return(profile: TargetProfile) -> bool:
    return (
        profile.gave_last_year
        and not profile.received_return
        and profile.gave_year_before
        and not profile.received_return_year_before
    )


def has_low_tangible_roi(profile: TargetProfile, roi: int) -> bool:
    return profile.benefit_type == BenefitType.TANGIBLE and roi < LOW_ROI_THRESHOLD


# ── 단일 대상 ──


def build_risk_warnings(profile: TargetProfile, roi: int) -> List[str]:
    """독립 판정. 해당하는 경고를 모두 반환."""
    warnings: List[str] = []

    if warns_romance_misread(profile):
        warnings.append(ROMANCE_MISREAD_WARNING)
    if has_two_years_without_return(profile):
        warnings.append(TWO_YEAR_NO_RETURN_WARNING)
    if has_low_tangible_roi(profile, roi):
        warnings.append(LOW_ROI_WARNING)
    if profile.relationship_goal == RelationshipGoal.DISTANCE:
        warnings.append(DISTANCE_GOAL_WARNING)
    if profile.emotional_priority <= 2 and profile.budget >= HIGH_BUDGET_THRESHOLD:
        warnings.append(LOW_PRIORITY_HIGH_BUDGET_WARNING)

    return warnings


# ── 배치 ──


def _names(items: Sequence) -> str:
    return "・".join(item.name for item in items)


def build_batch_warnings(
    profiles: Sequence[TargetProfile], analyzed: Sequence[AnalyzedTarget]
) -> List[str]:
    """배치 전체 경고 목록. 대상 이름을 묶어 한 줄씩."""
    warnings: List[str] = []

    cut_loss = [a for a in analyzed if a.outcome == BatchOutcomeType.CUT_LOSS]
    if cut_loss:
        warnings.append(f"{_names(cut_loss)}は損切り推奨です。投資を再検討してください。")

    no_return = [p for p in profiles if has_two_years_without_return(p)]
    if no_return:
        warnings.append(f"{_names(no_return)}は2年連続お返しなし。撤退を強く推奨します。")

    misread = [p for p in profiles if warns_low_priority_romance_misread(p)]
    if misread:
        warnings.append(
            f"{_names(misread)}は義理のつもりでも本命と誤解されるリスクがあります。渡し方に注意。"
        )

    high_emotion_low_rank = [
        a for a in analyzed if a.emotional_priority >= 4 and a.rank in (Rank.B, Rank.C)
    ]
    if high_emotion_low_rank:
        warnings.append(
            f"{_names(high_emotion_low_rank)}は感情的に重要ですがランクが低めです。"
            "予算補正を適用しています。"
        )

    distance_but_gave = [
        p
        for p in profiles
        if p.relationship_goal == RelationshipGoal.DISTANCE and p.gave_last_year
    ]
    if distance_but_gave:
        warnings.append(
            f"{_names(distance_but_gave)}は距離を置きたい相手ですが去年渡しています。"
            "急に止めるとトラブルの可能性も。"
        )

    return warnings
