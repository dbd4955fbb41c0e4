"""로컬 분석 오케스트레이터

단일 대상: ActionWeightedStrategy → 랭크 보정 → 성공 타입 → 선물/메시지/질문/경고.
배치:      BatchPriorStrategy → 전원 랭크 확정 → 예산 배분 → 대상별 조립 → 정렬.
원격 provider 없이 항상 동작하는 기준 계산.
"""

import logging
import random
from typing import List, Optional, Sequence

from valentactics.core.gift.catalog import GiftCatalog
from valentactics.core.gift.recommend import (
    generate_message,
    generate_questions,
    suggest_gift,
)
from valentactics.core.strategy.allocation import AllocationCandidate, allocate_budgets
from valentactics.core.strategy.models import (
    ActionWeightedScores,
    AnalyzedTarget,
    BatchAnalysis,
    BatchPriorScores,
    TargetAnalysis,
    TargetProfile,
)
from valentactics.core.strategy.outcome import determine_batch_outcome, determine_outcome
from valentactics.core.strategy.ranking import build_batch_rank_reason, build_rank_reason
from valentactics.core.strategy.risk_warnings import build_batch_warnings, build_risk_warnings
from valentactics.core.strategy.roi import predict_roi
from valentactics.core.strategy.scoring import ActionWeightedStrategy, BatchPriorStrategy
from valentactics.core.strategy.timeline import build_timeline

logger = logging.getLogger(__name__)

SINGLE_CLOSENESS_RATE = 0.008
BATCH_CLOSENESS_RATE = 0.01


def analyze_target(
    profile: TargetProfile,
    catalog: GiftCatalog,
    rng: Optional[random.Random] = None,
) -> TargetAnalysis:
    """단일 대상 분석."""
    rng = rng or random.Random()
    strategy = ActionWeightedStrategy()

    scores: ActionWeightedScores = strategy.score(profile, rng)
    rank = strategy.rank(profile, scores)
    outcome = determine_outcome(
        profile.benefit_type,
        scores.roi,
        scores.intimacy,
        profile.emotional_priority,
        profile.relationship_goal,
    )

    result = TargetAnalysis(
        target_name=profile.name,
        scores=scores,
        rank=rank,
        rank_reason=build_rank_reason(rank, scores, profile),
        outcome=outcome,
        gift=suggest_gift(profile, catalog),
        message=generate_message(profile.relationship),
        roi_prediction=predict_roi(
            profile, scores.roi, scores.intimacy, SINGLE_CLOSENESS_RATE
        ),
        questions=generate_questions(profile),
        risk_warnings=build_risk_warnings(profile, scores.roi),
    )
    logger.info(
        "Analyzed %s: total=%d rank=%s outcome=%s",
        profile.name,
        scores.total,
        rank.value,
        outcome.value,
    )
    return result


def analyze_batch(
    profiles: Sequence[TargetProfile],
    total_budget: int,
    catalog: GiftCatalog,
    rng: Optional[random.Random] = None,
) -> BatchAnalysis:
    """배치 분석. 예산 배분은 전원의 랭크가 확정된 뒤에 한 번."""
    rng = rng or random.Random()
    strategy = BatchPriorStrategy()

    scored: List[tuple[TargetProfile, BatchPriorScores]] = []
    for profile in profiles:
        scored.append((profile, strategy.score(profile, rng)))
    ranks = [strategy.rank(profile, scores) for profile, scores in scored]

    budgets = allocate_budgets(
        [
            AllocationCandidate(profile.key, rank, profile.emotional_priority)
            for (profile, _), rank in zip(scored, ranks)
        ],
        total_budget,
    )

    analyzed: List[AnalyzedTarget] = []
    for (profile, scores), rank in zip(scored, ranks):
        allocated = budgets.get(profile.key, 0)
        analyzed.append(
            AnalyzedTarget(
                target_id=profile.key,
                name=profile.name,
                relationship=profile.relationship,
                emotional_priority=profile.emotional_priority,
                scores=scores,
                rank=rank,
                rank_reason=build_batch_rank_reason(rank, scores, profile),
                outcome=determine_batch_outcome(profile, scores),
                allocated_budget=allocated,
                gift=suggest_gift(profile, catalog, budget=allocated, with_story=False),
                message=generate_message(profile.relationship),
                roi_prediction=predict_roi(
                    profile, scores.roi, scores.relationship, BATCH_CLOSENESS_RATE
                ),
            )
        )

    analyzed.sort(key=lambda t: -t.rank.order)

    logger.info(
        "Analyzed batch: %d targets, total_budget=%d, allocated=%d",
        len(analyzed),
        total_budget,
        sum(budgets.values()),
    )
    return BatchAnalysis(
        targets=analyzed,
        timeline=build_timeline(analyzed),
        warnings=build_batch_warnings(profiles, analyzed),
        total_budget=total_budget,
    )
