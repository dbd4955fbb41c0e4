"""선물 도메인 모델 (DB 무관)"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from valentactics.core.strategy.models import Preference


class BudgetTier(str, Enum):
    LOW = "low"  # < 1500
    MID = "mid"  # 1500 ~ 2999
    HIGH = "high"  # >= 3000


MID_TIER_MIN = 1500
HIGH_TIER_MIN = 3000


def budget_tier_for(budget: int) -> BudgetTier:
    if budget >= HIGH_TIER_MIN:
        return BudgetTier.HIGH
    if budget >= MID_TIER_MIN:
        return BudgetTier.MID
    return BudgetTier.LOW


@dataclass(frozen=True)
class GiftCatalogEntry:
    """카탈로그 항목 (불변). gift_catalog.json에서 로드."""

    gift_id: str  # "high_alcohol"
    tier: BudgetTier
    preference: Optional[Preference]  # None = 티어 기본 항목
    item: str
    price: int
    reason: str


@dataclass(frozen=True)
class GiftSuggestion:
    item: str
    price: int  # <= 예산
    reason: str
    story: str = ""
