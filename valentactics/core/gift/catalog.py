"""선물 카탈로그: JSON 로드 + 티어/취향 조회"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from valentactics.core.strategy.models import Preference

from .models import BudgetTier, GiftCatalogEntry

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = (
    Path(__file__).resolve().parent.parent.parent / "data" / "gift_catalog.json"
)


class GiftCatalog:
    """
    예산 티어 × 취향 태그 → 선물 항목.
    파일 내 순서가 취향 우선순위.
    """

    def __init__(self) -> None:
        self._entries: dict[BudgetTier, list[GiftCatalogEntry]] = {
            tier: [] for tier in BudgetTier
        }
        self._defaults: dict[BudgetTier, GiftCatalogEntry] = {}

    @classmethod
    def default(cls) -> GiftCatalog:
        """패키지 동봉 카탈로그."""
        catalog = cls()
        catalog.load_from_json(DEFAULT_CATALOG_PATH)
        return catalog

    def load_from_json(self, path: str | Path) -> int:
        """gift_catalog.json 로드. 반환: 로드된 수량.

        preference가 null인 항목은 티어 기본 항목.
        깨진 항목은 경고 후 건너뛴다.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw_list: list[dict] = json.load(f)

        count = 0
        for raw in raw_list:
            try:
                preference = raw.get("preference")
                entry = GiftCatalogEntry(
                    gift_id=raw["gift_id"],
                    tier=BudgetTier(raw["tier"]),
                    preference=Preference(preference) if preference else None,
                    item=raw["item"],
                    price=int(raw["price"]),
                    reason=raw.get("reason", ""),
                )
                self.register(entry)
                count += 1
            except (KeyError, ValueError) as e:
                logger.warning(
                    "Failed to load gift entry: %s (%s)", raw.get("gift_id", "?"), e
                )

        logger.info("Loaded %d gift entries from %s", count, path)
        return count

    def register(self, entry: GiftCatalogEntry) -> None:
        """항목 등록. 같은 티어의 기본 항목은 덮어쓴다."""
        if entry.preference is None:
            if entry.tier in self._defaults:
                logger.warning("Overwriting default gift for tier: %s", entry.tier.value)
            self._defaults[entry.tier] = entry
        else:
            self._entries[entry.tier].append(entry)

    def lookup(
        self, tier: BudgetTier, preferences: Iterable[Preference]
    ) -> GiftCatalogEntry:
        """우선순위 순으로 첫 일치 항목, 없으면 티어 기본 항목.

        기본 항목이 없는 티어는 KeyError (카탈로그 불량).
        """
        match = self.find_preferred(tier, preferences)
        if match is not None:
            return match
        return self._defaults[tier]

    def find_preferred(
        self, tier: BudgetTier, preferences: Iterable[Preference]
    ) -> Optional[GiftCatalogEntry]:
        pref_set = set(preferences)
        for entry in self._entries[tier]:
            if entry.preference in pref_set:
                return entry
        return None

    def get_all(self) -> list[GiftCatalogEntry]:
        entries = [e for tier in BudgetTier for e in self._entries[tier]]
        return entries + list(self._defaults.values())

    def count(self) -> int:
        return len(self.get_all())
