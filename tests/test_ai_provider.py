"""Tests for AI provider module."""

import json
from unittest.mock import MagicMock, patch

import pytest

from valentactics.services.ai import (
    AIProvider,
    CompletionRequest,
    GeminiProvider,
    MockProvider,
    get_ai_provider,
)
from valentactics.services.ai.mock import MOCK_TEXT_RESPONSE


def _request(json_mode: bool = True) -> CompletionRequest:
    return CompletionRequest(
        system_prompt="system", user_prompt="user", max_tokens=200, json_mode=json_mode
    )


class TestMockProvider:
    """Tests for MockProvider class."""

    def test_mock_provider_identity(self):
        """Test that MockProvider is named 'mock' and always available."""
        provider = MockProvider()
        assert provider.name == "mock"
        assert provider.is_available() is True

    def test_mock_provider_json_mode(self):
        """Test that JSON-mode requests get a parseable analysis."""
        data = json.loads(MockProvider().complete(_request()))
        assert data["rank"] == "B"
        assert 0 <= data["score_total"] <= 100

    def test_mock_provider_text_mode(self):
        """Test that plain requests get the fixed text line."""
        assert MockProvider().complete(_request(json_mode=False)) == MOCK_TEXT_RESPONSE


class TestGeminiProvider:
    """Tests for GeminiProvider class."""

    @patch("valentactics.services.ai.gemini.genai")
    def test_gemini_availability_follows_key(self, mock_genai: MagicMock):
        """Test that GeminiProvider is only available with an API key."""
        assert GeminiProvider(api_key="test_key").is_available() is True
        assert GeminiProvider(api_key="").is_available() is False
        mock_genai.configure.assert_called_once_with(api_key="test_key")

    @patch("valentactics.services.ai.gemini.genai")
    def test_gemini_complete_passes_system_prompt(self, mock_genai: MagicMock):
        """Test that the system prompt becomes the model's system instruction."""
        model = mock_genai.GenerativeModel.return_value
        model.generate_content.return_value.text = '  {"rank": "A"}\n'

        provider = GeminiProvider(api_key="test_key", model="gemini-test")
        result = provider.complete(_request())

        assert result == '{"rank": "A"}'
        mock_genai.GenerativeModel.assert_called_once_with(
            "gemini-test", system_instruction="system"
        )
        config_kwargs = mock_genai.types.GenerationConfig.call_args.kwargs
        assert config_kwargs["max_output_tokens"] == 200
        assert config_kwargs["response_mime_type"] == "application/json"

    @patch("valentactics.services.ai.gemini.genai")
    def test_gemini_complete_wraps_errors(self, mock_genai: MagicMock):
        """Test that SDK errors surface as RuntimeError."""
        model = mock_genai.GenerativeModel.return_value
        model.generate_content.side_effect = ValueError("quota")

        provider = GeminiProvider(api_key="test_key")
        with pytest.raises(RuntimeError, match="quota"):
            provider.complete(_request())

    @patch("valentactics.services.ai.gemini.genai")
    def test_gemini_complete_empty_reply(self, mock_genai: MagicMock):
        """Test that an empty reply is treated as a failure."""
        model = mock_genai.GenerativeModel.return_value
        model.generate_content.return_value.text = "   "

        provider = GeminiProvider(api_key="test_key")
        with pytest.raises(RuntimeError, match="empty"):
            provider.complete(_request())

    @patch("valentactics.services.ai.gemini.genai")
    def test_gemini_complete_unconfigured(self, mock_genai: MagicMock):
        """Test that completing without a key raises RuntimeError."""
        with pytest.raises(RuntimeError):
            GeminiProvider(api_key="").complete(_request())
        mock_genai.GenerativeModel.assert_not_called()


class TestAIProviderFactory:
    """Tests for AI provider factory."""

    @patch("valentactics.services.ai.factory.settings")
    def test_factory_returns_mock(self, mock_settings: MagicMock):
        """Test that factory returns MockProvider for AI_PROVIDER=mock."""
        mock_settings.AI_PROVIDER = "mock"

        provider = get_ai_provider()

        assert isinstance(provider, AIProvider)
        assert isinstance(provider, MockProvider)

    @patch("valentactics.services.ai.factory.settings")
    @patch("valentactics.services.ai.gemini.genai")
    def test_factory_returns_gemini_with_config(
        self, mock_genai: MagicMock, mock_settings: MagicMock
    ):
        """Test that factory returns GeminiProvider when configured."""
        mock_settings.AI_PROVIDER = "Gemini"
        mock_settings.AI_API_KEY = "test_key"
        mock_settings.AI_MODEL = None
        mock_settings.AI_TEMPERATURE = 0.0

        provider = get_ai_provider()

        assert isinstance(provider, GeminiProvider)
        assert provider.model_name == "gemini-2.0-flash"

    @patch("valentactics.services.ai.factory.settings")
    def test_factory_fallback_without_key(self, mock_settings: MagicMock):
        """Test that factory falls back to mock without an API key."""
        mock_settings.AI_PROVIDER = "gemini"
        mock_settings.AI_API_KEY = None

        assert isinstance(get_ai_provider(), MockProvider)

    def test_factory_unknown_provider(self):
        """Test that an unknown provider name falls back to mock."""
        assert isinstance(get_ai_provider("unknown"), MockProvider)
