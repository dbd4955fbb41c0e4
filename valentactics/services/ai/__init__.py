"""Alternate analysis providers."""

from valentactics.services.ai.base import AIProvider, CompletionRequest
from valentactics.services.ai.factory import get_ai_provider
from valentactics.services.ai.gemini import GeminiProvider
from valentactics.services.ai.mock import MockProvider

__all__ = [
    "AIProvider",
    "CompletionRequest",
    "GeminiProvider",
    "MockProvider",
    "get_ai_provider",
]
