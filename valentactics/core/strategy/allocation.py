"""예산 배분 (배치 모드 전용)

랭크별 비율 S:40% A:30% B:20% C:10%, 활성 랭크만으로 재정규화.
그룹 반올림 → 1인 반올림의 이중 반올림이므로 합계는 총예산과 몇 원 어긋날 수 있다.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from valentactics.core.strategy.calculations import round_half_up
from valentactics.core.strategy.models import Rank
from valentactics.core.strategy.ranking import promote_one_tier

logger = logging.getLogger(__name__)

RANK_ALLOCATION_RATIOS: Dict[Rank, float] = {
    Rank.S: 0.40,
    Rank.A: 0.30,
    Rank.B: 0.20,
    Rank.C: 0.10,
}

HIGH_EMOTION_FLOOR_RATIO = 0.05


@dataclass(frozen=True)
class AllocationCandidate:
    """배분 입력 1건"""

    target_id: str
    rank: Rank
    emotional_priority: int


def effective_rank(rank: Rank, emotional_priority: int) -> Rank:
    """ep=5면 1단계 승격 (S는 그대로). 배분 그룹핑 전용."""
    if emotional_priority == 5:
        return promote_one_tier(rank)
    return rank


def allocate_budgets(
    candidates: List[AllocationCandidate], total_budget: int
) -> Dict[str, int]:
    """대상별 배분액 반환. 대상 0명 또는 총예산 0 이하 → 빈 dict."""
    if not candidates or total_budget <= 0:
        return {}

    groups: Dict[Rank, List[str]] = {rank: [] for rank in RANK_ALLOCATION_RATIOS}
    for candidate in candidates:
        rank = effective_rank(candidate.rank, candidate.emotional_priority)
        groups[rank].append(candidate.target_id)

    active_ranks = [rank for rank in RANK_ALLOCATION_RATIOS if groups[rank]]
    total_ratio = sum(RANK_ALLOCATION_RATIOS[rank] for rank in active_ranks)

    allocations: Dict[str, int] = {}
    for rank in active_ranks:
        members = groups[rank]
        group_budget = round_half_up(
            (RANK_ALLOCATION_RATIOS[rank] / total_ratio) * total_budget
        )
        per_member = round_half_up(group_budget / len(members))
        for target_id in members:
            allocations[target_id] = per_member

    # 감정 보정: ep>=4 이면서 원래 랭크 C → 최저 5% 보장
    floor = round_half_up(total_budget * HIGH_EMOTION_FLOOR_RATIO)
    for candidate in candidates:
        if candidate.emotional_priority >= 4 and candidate.rank == Rank.C:
            if allocations[candidate.target_id] < floor:
                logger.debug(
                    "Raising %s to high-emotion floor %d",
                    candidate.target_id,
                    floor,
                )
                allocations[candidate.target_id] = floor

    return allocations
