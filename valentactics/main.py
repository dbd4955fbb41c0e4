"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from valentactics.api.analysis import router as analysis_router
from valentactics.api.health import router as health_router
from valentactics.config import settings
from valentactics.core.gift.catalog import GiftCatalog
from valentactics.core.logging import get_logger, setup_logging
from valentactics.services.ai import get_ai_provider
from valentactics.services.analysis_service import AnalysisService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def load_catalog() -> GiftCatalog:
    """설정 경로가 있으면 그 카탈로그, 없으면 패키지 동봉 카탈로그."""
    if settings.GIFT_CATALOG_PATH:
        catalog = GiftCatalog()
        catalog.load_from_json(settings.GIFT_CATALOG_PATH)
        return catalog
    return GiftCatalog.default()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    # 선물 카탈로그
    logger.info("Loading gift catalog...")
    catalog = load_catalog()
    logger.info("Gift catalog loaded (%d entries).", catalog.count())

    # AI Provider 및 AnalysisService 초기화
    logger.info("Initializing AI provider...")
    ai_provider = get_ai_provider()
    app.state.analysis_service = AnalysisService(
        ai_provider,
        catalog,
        remote_enabled=settings.REMOTE_ANALYSIS_ENABLED,
        seed=settings.RANDOM_SEED,
    )
    logger.info(
        "AI provider initialized: %s (remote analysis %s)",
        ai_provider.name,
        "on" if settings.REMOTE_ANALYSIS_ENABLED else "off",
    )

    yield

    logger.info("Shutting down...")
    app.state.analysis_service = None


app = FastAPI(title="Valentactics", debug=settings.DEBUG, lifespan=lifespan)

app.include_router(health_router)
app.include_router(analysis_router)
