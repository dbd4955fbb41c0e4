"""분석 결과 검증 테스트"""

from __future__ import annotations

import json

import pytest

from valentactics.core.gift.models import GiftSuggestion
from valentactics.core.strategy.models import (
    ActionWeightedScores,
    OutcomeType,
    Rank,
    RoiPrediction,
    TargetAnalysis,
)
from valentactics.services.ai.mock import MOCK_ANALYSIS_RESPONSE
from valentactics.services.analysis_validation import (
    AnalysisInvariantError,
    analysis_from_payload,
    payload_from_analysis,
    validate_remote_payload,
)


def _raw(**overrides) -> dict:
    data = json.loads(MOCK_ANALYSIS_RESPONSE)
    data.update(overrides)
    return data


def _make_analysis(**kwargs) -> TargetAnalysis:
    defaults = dict(
        target_name="山本",
        scores=ActionWeightedScores(intimacy=40, roi=50, gift_fit=45, total=46),
        rank=Rank.B,
        rank_reason="標準対応: バランス型",
        outcome=OutcomeType.NEEDS_REVIEW,
        gift=GiftSuggestion(item="焼き菓子アソート", price=1800, reason="安心"),
        message="ほんの気持ちですが、どうぞ。",
        roi_prediction=RoiPrediction(return_probability=0.25, expected_multiplier=0.6),
    )
    defaults.update(kwargs)
    return TargetAnalysis(**defaults)


class TestRemotePayload:
    def test_valid_payload(self) -> None:
        payload = validate_remote_payload(_raw(), budget=1000)
        assert payload is not None
        assert payload.rank == Rank.B
        assert payload.outcome == OutcomeType.NEEDS_REVIEW

    def test_extra_fields_ignored(self) -> None:
        assert validate_remote_payload(_raw(comment="extra"), budget=1000) is not None

    @pytest.mark.parametrize(
        "overrides",
        [
            {"score_total": 101},
            {"score_roi": -1},
            {"score_intimacy": "high"},
            {"rank": "X"},
            {"outcome": "maybe"},
            {"gift_item": ""},
            {"message": ""},
            {"return_probability": 1.5},
            {"questions": ["q"] * 6},
            {"risk_warnings": ["w" * 201]},
        ],
    )
    def test_out_of_bounds_rejected(self, overrides: dict) -> None:
        assert validate_remote_payload(_raw(**overrides), budget=1000) is None

    def test_missing_field_rejected(self) -> None:
        raw = _raw()
        del raw["score_gift_fit"]
        assert validate_remote_payload(raw, budget=1000) is None

    def test_price_over_budget_rejected(self) -> None:
        assert validate_remote_payload(_raw(gift_price=2000), budget=1000) is None

    def test_payload_to_analysis(self) -> None:
        payload = validate_remote_payload(_raw(), budget=1000)
        assert payload is not None
        analysis = analysis_from_payload(payload, "山本", "mock")
        assert analysis.source == "mock"
        assert analysis.target_name == "山本"
        assert analysis.scores.total == 46
        assert analysis.gift.price == 300


class TestLocalInvariant:
    def test_valid_local_analysis(self) -> None:
        payload = payload_from_analysis(_make_analysis())
        assert payload.score_total == 46

    def test_out_of_bounds_local_analysis_raises(self) -> None:
        analysis = _make_analysis(
            scores=ActionWeightedScores(intimacy=101, roi=50, gift_fit=45, total=46)
        )
        with pytest.raises(AnalysisInvariantError):
            payload_from_analysis(analysis)

    def test_too_many_questions_raises(self) -> None:
        analysis = _make_analysis(questions=["q"] * 6)
        with pytest.raises(AnalysisInvariantError):
            payload_from_analysis(analysis)
