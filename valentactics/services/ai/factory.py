"""Provider selection from settings."""

from typing import Callable, Dict, Optional

from valentactics.config import settings
from valentactics.core.logging import get_logger
from valentactics.services.ai.base import AIProvider
from valentactics.services.ai.gemini import DEFAULT_GEMINI_MODEL, GeminiProvider
from valentactics.services.ai.mock import MockProvider

logger = get_logger(__name__)


def _build_mock() -> AIProvider:
    return MockProvider()


def _build_gemini() -> AIProvider:
    if not settings.AI_API_KEY:
        logger.warning("AI_PROVIDER=gemini but AI_API_KEY is empty; using mock")
        return MockProvider()
    return GeminiProvider(
        api_key=settings.AI_API_KEY,
        model=settings.AI_MODEL or DEFAULT_GEMINI_MODEL,
        temperature=settings.AI_TEMPERATURE,
    )


PROVIDER_BUILDERS: Dict[str, Callable[[], AIProvider]] = {
    "mock": _build_mock,
    "gemini": _build_gemini,
}


def get_ai_provider(provider_name: Optional[str] = None) -> AIProvider:
    """Build the provider named by the argument or by AI_PROVIDER.

    Unknown names fall back to MockProvider with a warning.
    """
    name = (provider_name or settings.AI_PROVIDER).strip().lower()
    builder = PROVIDER_BUILDERS.get(name)
    if builder is None:
        logger.warning("Unknown AI provider %r; using mock", name)
        return MockProvider()

    provider = builder()
    logger.debug("AI provider selected: %s", provider.name)
    return provider
