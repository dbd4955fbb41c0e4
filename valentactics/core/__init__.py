"""Valentactics Core Engine"""
__version__ = "0.1.0"

from valentactics.core.strategy.analyzer import analyze_batch, analyze_target
from valentactics.core.gift.catalog import GiftCatalog
from valentactics.core.gift.models import GiftSuggestion

__all__ = [
    "analyze_batch",
    "analyze_target",
    "GiftCatalog",
    "GiftSuggestion",
]
