"""분석 결과 검증: 원격 응답과 로컬 결과에 같은 경계를 적용

원격 응답 검증 실패는 폴백 사유 (경고 후 None).
로컬 결과 검증 실패는 계산 버그 (AnalysisInvariantError).
"""

import logging
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from valentactics.core.gift.models import GiftSuggestion
from valentactics.core.strategy.models import (
    ActionWeightedScores,
    OutcomeType,
    Rank,
    RoiPrediction,
    TargetAnalysis,
)

logger = logging.getLogger(__name__)

MAX_LIST_ITEMS = 5

Score = Annotated[int, Field(ge=0, le=100)]
ListItem = Annotated[str, Field(max_length=200)]


class AnalysisInvariantError(RuntimeError):
    """로컬 분석 결과가 경계를 벗어남"""


class AnalysisPayload(BaseModel):
    """단일 대상 분석 결과의 평탄화 표현"""

    model_config = ConfigDict(extra="ignore")

    score_intimacy: Score
    score_roi: Score
    score_gift_fit: Score
    score_total: Score
    rank: Rank
    rank_reason: str = Field("", max_length=300)
    outcome: OutcomeType
    gift_item: str = Field(..., min_length=1, max_length=100)
    gift_price: int = Field(..., ge=0, le=100000)
    gift_reason: str = Field("", max_length=200)
    gift_story: str = Field("", max_length=500)
    message: str = Field(..., min_length=1, max_length=500)
    return_probability: float = Field(..., ge=0.0, le=1.0)
    expected_multiplier: float = Field(..., ge=0.0, le=100.0)
    questions: list[ListItem] = Field(default_factory=list, max_length=MAX_LIST_ITEMS)
    risk_warnings: list[ListItem] = Field(
        default_factory=list, max_length=MAX_LIST_ITEMS
    )


def payload_from_analysis(analysis: TargetAnalysis) -> AnalysisPayload:
    """로컬 결과 검증. 경계 위반은 AnalysisInvariantError."""
    try:
        return AnalysisPayload(
            score_intimacy=analysis.scores.intimacy,
            score_roi=analysis.scores.roi,
            score_gift_fit=analysis.scores.gift_fit,
            score_total=analysis.scores.total,
            rank=analysis.rank,
            rank_reason=analysis.rank_reason,
            outcome=analysis.outcome,
            gift_item=analysis.gift.item,
            gift_price=analysis.gift.price,
            gift_reason=analysis.gift.reason,
            gift_story=analysis.gift.story,
            message=analysis.message,
            return_probability=analysis.roi_prediction.return_probability,
            expected_multiplier=analysis.roi_prediction.expected_multiplier,
            questions=analysis.questions,
            risk_warnings=analysis.risk_warnings,
        )
    except ValidationError as e:
        raise AnalysisInvariantError(
            f"Local analysis for {analysis.target_name} out of bounds: {e}"
        ) from e


def analysis_from_payload(
    payload: AnalysisPayload, target_name: str, source: str
) -> TargetAnalysis:
    return TargetAnalysis(
        target_name=target_name,
        scores=ActionWeightedScores(
            intimacy=payload.score_intimacy,
            roi=payload.score_roi,
            gift_fit=payload.score_gift_fit,
            total=payload.score_total,
        ),
        rank=payload.rank,
        rank_reason=payload.rank_reason,
        outcome=payload.outcome,
        gift=GiftSuggestion(
            item=payload.gift_item,
            price=payload.gift_price,
            reason=payload.gift_reason,
            story=payload.gift_story,
        ),
        message=payload.message,
        roi_prediction=RoiPrediction(
            return_probability=payload.return_probability,
            expected_multiplier=payload.expected_multiplier,
        ),
        questions=list(payload.questions),
        risk_warnings=list(payload.risk_warnings),
        source=source,
    )


def validate_remote_payload(raw: dict, budget: int) -> AnalysisPayload | None:
    """원격 응답 검증. 실패 시 경고 후 None.

    - 점수 0~100 정수, 랭크/성공 타입은 열거값
    - 선물 가격 <= 예산
    """
    try:
        payload = AnalysisPayload.model_validate(raw)
    except ValidationError as e:
        logger.warning("Remote analysis rejected: %d validation errors", e.error_count())
        return None

    if payload.gift_price > budget:
        logger.warning(
            "Remote analysis rejected: gift price %d exceeds budget %d",
            payload.gift_price,
            budget,
        )
        return None
    return payload
