"""로컬 분석 오케스트레이터 테스트: 단일 대상 / 배치 end-to-end"""

from __future__ import annotations

import random

import pytest

from valentactics.core.gift.catalog import GiftCatalog
from valentactics.core.gift.recommend import MESSAGES
from valentactics.core.strategy.analyzer import analyze_batch, analyze_target
from valentactics.core.strategy.models import (
    BenefitType,
    OutcomeType,
    Rank,
    RecipientAction,
    RelationshipGoal,
    RelationshipType,
    ReturnTendency,
    TargetProfile,
)


def _make_profile(**kwargs) -> TargetProfile:
    defaults = dict(
        name="佐々木",
        relationship=RelationshipType.COLLEAGUE,
        benefit_type=BenefitType.TANGIBLE,
        relationship_goal=RelationshipGoal.MAINTAIN,
        emotional_priority=3,
        budget=1000,
    )
    defaults.update(kwargs)
    return TargetProfile(**defaults)


class TestAnalyzeTarget:
    def test_minimal_colleague(self, catalog: GiftCatalog) -> None:
        """행동 없음 + 이력 없음 + 예산 300: 최저 적합도, C 랭크, 저예산 기본 선물"""
        profile = _make_profile(budget=300, return_tendency=ReturnTendency.UNKNOWN)
        result = analyze_target(profile, catalog, random.Random(1))

        assert result.scores.gift_fit == 15
        assert result.scores.intimacy == 5
        assert result.rank == Rank.C
        assert result.gift.item == "ブラックサンダー 義理チョコパック"
        assert result.gift.price <= 300
        assert result.gift.story == ""
        assert result.message == MESSAGES[RelationshipType.COLLEAGUE]
        assert result.outcome == OutcomeType.NEEDS_REVIEW
        assert result.source == "local"

    def test_ep5_with_distance_ends_at_a(self, catalog: GiftCatalog) -> None:
        """ep=5는 C를 A로 올리고, 거리 두기 상한은 ep<=2일 때만"""
        profile = _make_profile(
            emotional_priority=5, relationship_goal=RelationshipGoal.DISTANCE
        )
        result = analyze_target(profile, catalog, random.Random(2))

        assert result.scores.total < 40
        assert result.rank == Rank.A
        assert result.outcome == OutcomeType.EMOTIONAL

    def test_intangible_gets_story(self, catalog: GiftCatalog) -> None:
        profile = _make_profile(
            benefit_type=BenefitType.INTANGIBLE,
            relationship=RelationshipType.ROMANTIC_INTEREST,
            budget=3000,
        )
        result = analyze_target(profile, catalog, random.Random(3))
        assert result.gift.story != ""
        assert result.gift.item in result.gift.story

    def test_same_seed_is_idempotent(self, catalog: GiftCatalog) -> None:
        profile = _make_profile(
            recipient_actions=(RecipientAction.ASKS_FOR_ADVICE,),
            gave_last_year=True,
            received_return=True,
            return_value=1500,
        )
        first = analyze_target(profile, catalog, random.Random(42))
        second = analyze_target(profile, catalog, random.Random(42))
        assert first.to_dict() == second.to_dict()

    def test_to_dict_uses_enum_values(self, catalog: GiftCatalog) -> None:
        data = analyze_target(_make_profile(), catalog, random.Random(5)).to_dict()
        assert data["rank"] in {"S", "A", "B", "C"}
        assert isinstance(data["outcome"], str)
        assert set(data["scores"]) == {"intimacy", "roi", "gift_fit", "total"}


class TestAnalyzeBatch:
    def _profiles(self) -> list[TargetProfile]:
        return [
            _make_profile(name="部長", relationship=RelationshipType.BOSS, emotional_priority=2),
            _make_profile(
                name="恋人",
                relationship=RelationshipType.PARTNER,
                relationship_goal=RelationshipGoal.DEEPEN,
                benefit_type=BenefitType.INTANGIBLE,
                emotional_priority=5,
            ),
            _make_profile(name="友達", relationship=RelationshipType.FRIEND),
            _make_profile(
                name="元同僚",
                relationship_goal=RelationshipGoal.DISTANCE,
                emotional_priority=1,
                gave_last_year=True,
                gave_year_before=True,
            ),
        ]

    def test_every_target_present(self, catalog: GiftCatalog) -> None:
        result = analyze_batch(self._profiles(), 10000, catalog, random.Random(9))
        assert {t.name for t in result.targets} == {"部長", "恋人", "友達", "元同僚"}
        assert result.total_budget == 10000

    def test_sorted_by_rank(self, catalog: GiftCatalog) -> None:
        result = analyze_batch(self._profiles(), 10000, catalog, random.Random(9))
        orders = [t.rank.order for t in result.targets]
        assert orders == sorted(orders, reverse=True)

    def test_gift_fits_allocation_without_story(self, catalog: GiftCatalog) -> None:
        result = analyze_batch(self._profiles(), 10000, catalog, random.Random(9))
        for target in result.targets:
            assert target.gift.price <= target.allocated_budget
            assert target.gift.story == ""

    def test_allocation_close_to_total(self, catalog: GiftCatalog) -> None:
        result = analyze_batch(self._profiles(), 10000, catalog, random.Random(9))
        allocated = sum(t.allocated_budget for t in result.targets)
        assert abs(allocated - 10000) <= len(result.targets)

    def test_partner_with_top_priority_ranks_high(self, catalog: GiftCatalog) -> None:
        """deepen × partner(90~100) + ep5(100): 총점 >= 87 → S"""
        result = analyze_batch(self._profiles(), 10000, catalog, random.Random(9))
        partner = next(t for t in result.targets if t.name == "恋人")
        assert partner.rank == Rank.S
        assert result.targets[0].name == "恋人"

    def test_timeline_and_warnings(self, catalog: GiftCatalog) -> None:
        result = analyze_batch(self._profiles(), 10000, catalog, random.Random(9))
        assert any(entry.date == "2/14" for entry in result.timeline)
        assert any("元同僚" in w and "2年連続" in w for w in result.warnings)

    def test_same_seed_is_idempotent(self, catalog: GiftCatalog) -> None:
        first = analyze_batch(self._profiles(), 5000, catalog, random.Random(1))
        second = analyze_batch(self._profiles(), 5000, catalog, random.Random(1))
        assert first.to_dict() == second.to_dict()

    @pytest.mark.parametrize("total_budget", [0, -100])
    def test_non_positive_budget_allocates_nothing(
        self, catalog: GiftCatalog, total_budget: int
    ) -> None:
        result = analyze_batch(self._profiles(), total_budget, catalog, random.Random(1))
        assert all(t.allocated_budget == 0 for t in result.targets)

    def test_empty_batch(self, catalog: GiftCatalog) -> None:
        result = analyze_batch([], 10000, catalog, random.Random(1))
        assert result.targets == []
        assert result.warnings == []
