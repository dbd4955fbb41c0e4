"""Analysis API endpoints."""

from fastapi import APIRouter, Depends, Request

from valentactics.api.schemas import (
    BatchAnalysisRequest,
    BatchAnalysisResponse,
    TargetAnalysisResponse,
    TargetProfileRequest,
)
from valentactics.core.logging import get_logger
from valentactics.services.analysis_service import AnalysisService

logger = get_logger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])


def get_analysis_service(request: Request) -> AnalysisService:
    """AnalysisService 인스턴스 반환 (의존성 주입)"""
    service: AnalysisService = request.app.state.analysis_service
    return service


@router.post("/target", response_model=TargetAnalysisResponse)
def analyze_target(
    body: TargetProfileRequest,
    service: AnalysisService = Depends(get_analysis_service),
) -> TargetAnalysisResponse:
    """단일 대상 분석"""
    result = service.analyze_target(body.to_profile())
    return TargetAnalysisResponse.model_validate(result.to_dict())


@router.post("/batch", response_model=BatchAnalysisResponse)
def analyze_batch(
    body: BatchAnalysisRequest,
    service: AnalysisService = Depends(get_analysis_service),
) -> BatchAnalysisResponse:
    """배치 분석 (예산 배분 포함)"""
    profiles = [t.to_profile() for t in body.targets]
    result = service.analyze_batch(profiles, body.total_budget)
    logger.debug("Batch response: %d targets", len(result.targets))
    return BatchAnalysisResponse.model_validate(result.to_dict())
