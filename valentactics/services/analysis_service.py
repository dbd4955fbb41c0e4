"""Analysis service: single gateway for target and batch analysis.

로컬 계산이 기준. 원격 provider는 단일 대상 모드에서만 선택적으로 사용하고,
실패하면 항상 로컬 결과로 돌아간다.
"""

import random
from typing import Optional, Sequence

from valentactics.core.gift.catalog import GiftCatalog
from valentactics.core.logging import get_logger
from valentactics.core.strategy.analyzer import analyze_batch, analyze_target
from valentactics.core.strategy.models import (
    BatchAnalysis,
    TargetAnalysis,
    TargetProfile,
)
from valentactics.services.ai.base import AIProvider
from valentactics.services.analysis_parser import ResponseParser
from valentactics.services.analysis_prompts import AnalysisPromptBuilder
from valentactics.services.analysis_validation import (
    analysis_from_payload,
    payload_from_analysis,
    validate_remote_payload,
)

logger = get_logger(__name__)


class AnalysisService:
    """Service wrapping the local analyzer with an optional remote provider."""

    def __init__(
        self,
        ai_provider: AIProvider,
        catalog: GiftCatalog,
        remote_enabled: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the analysis service.

        Args:
            ai_provider: Provider used for remote single-target analysis.
            catalog: Gift catalog for local recommendations.
            remote_enabled: Try the provider before the local analyzer.
            seed: Fixed seed for the ROI tie-breaker. None means unseeded.
        """
        self.ai = ai_provider
        self._catalog = catalog
        self._remote_enabled = remote_enabled
        self._seed = seed
        self._prompt_builder = AnalysisPromptBuilder()
        self._parser = ResponseParser()

    @property
    def remote_enabled(self) -> bool:
        return self._remote_enabled

    def analyze_target(self, profile: TargetProfile) -> TargetAnalysis:
        """단일 대상 분석. 원격 → 실패 시 로컬."""
        if self._remote_enabled:
            remote = self._analyze_remote(profile)
            if remote is not None:
                return remote

        result = analyze_target(profile, self._catalog, self._new_rng())
        payload_from_analysis(result)
        return result

    def analyze_batch(
        self, profiles: Sequence[TargetProfile], total_budget: int
    ) -> BatchAnalysis:
        """배치 분석. 항상 로컬."""
        return analyze_batch(profiles, total_budget, self._catalog, self._new_rng())

    # === 내부 ===

    def _new_rng(self) -> random.Random:
        return random.Random(self._seed)

    def _analyze_remote(self, profile: TargetProfile) -> Optional[TargetAnalysis]:
        """원격 분석 시도. 호출/파싱/검증 중 하나라도 실패하면 None."""
        if not self.ai.is_available():
            logger.warning("AI provider %s unavailable, using local", self.ai.name)
            return None

        request = self._prompt_builder.build(profile)
        try:
            raw = self.ai.complete(request)
        except Exception as e:
            logger.warning("Remote analysis failed, using local: %s", e)
            return None

        parsed = self._parser.parse_json(raw)
        if parsed is None:
            return None

        payload = validate_remote_payload(parsed, profile.budget)
        if payload is None:
            return None

        logger.info("Remote analysis accepted for %s (%s)", profile.name, self.ai.name)
        return analysis_from_payload(payload, profile.name, self.ai.name)
