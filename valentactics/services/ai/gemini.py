"""Google Gemini provider."""

import google.generativeai as genai

from valentactics.core.logging import get_logger
from valentactics.services.ai.base import AIProvider, CompletionRequest

logger = get_logger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"


class GeminiProvider(AIProvider):
    """Provider backed by the google-generativeai SDK."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        temperature: float = 0.2,
    ) -> None:
        """Configure the SDK.

        Args:
            api_key: Google API key. Empty means unavailable.
            model: Gemini model name.
            temperature: Sampling temperature for every request.
        """
        self._model_name = model
        self._temperature = temperature
        self._configured = bool(api_key)

        if self._configured:
            genai.configure(api_key=api_key)
            logger.info("GeminiProvider configured: model=%s", model)

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def model_name(self) -> str:
        return self._model_name

    def is_available(self) -> bool:
        return self._configured

    def complete(self, request: CompletionRequest) -> str:
        """Call generate_content with the request's system instruction.

        Raises:
            RuntimeError: If the provider is unconfigured, the call fails,
                or the reply has no text (e.g. blocked by safety filters).
        """
        if not self._configured:
            raise RuntimeError("GeminiProvider is not configured. Check AI_API_KEY.")

        model = genai.GenerativeModel(
            self._model_name,
            system_instruction=request.system_prompt or None,
        )
        config = genai.types.GenerationConfig(
            max_output_tokens=request.max_tokens,
            temperature=self._temperature,
            response_mime_type="application/json" if request.json_mode else "text/plain",
        )

        try:
            response = model.generate_content(
                request.user_prompt, generation_config=config
            )
            text: str = response.text
        except Exception as e:
            logger.error("Gemini request failed: %s", e)
            raise RuntimeError(f"Gemini request failed: {e}") from e

        if not text or not text.strip():
            raise RuntimeError("Gemini returned an empty reply")
        return text.strip()
