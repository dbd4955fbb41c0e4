"""선물 추천 Core: 순수 Python, DB 무관"""

from .models import BudgetTier, GiftCatalogEntry, GiftSuggestion, budget_tier_for
from .catalog import GiftCatalog

__all__ = [
    "BudgetTier",
    "GiftCatalogEntry",
    "GiftSuggestion",
    "budget_tier_for",
    "GiftCatalog",
]
