"""
Tests for completion model adapters.
"""

from unittest.mock import MagicMock, patch

from repocritic.config import Settings
from repocritic.llm import GeminiModel, get_model


class TestGeminiModel:
    def test_generate_returns_response_text(self):
        with patch("google.generativeai.configure") as configure, \
                patch("google.generativeai.GenerativeModel") as generative_model:
            generative_model.return_value.generate_content.return_value = MagicMock(text="Use memo")
            model = GeminiModel("key-123", "gemini-1.5-flash")

            assert model.generate("review this") == "Use memo"

            configure.assert_called_once_with(api_key="key-123")
            generative_model.assert_called_once_with("gemini-1.5-flash")
            generative_model.return_value.generate_content.assert_called_once_with("review this")

    def test_client_created_once(self):
        with patch("google.generativeai.configure"), \
                patch("google.generativeai.GenerativeModel") as generative_model:
            generative_model.return_value.generate_content.return_value = MagicMock(text="x")
            model = GeminiModel("key")
            model.generate("a")
            model.generate("b")
            assert generative_model.call_count == 1


class TestGetModel:
    def test_none_without_api_key(self):
        assert get_model(Settings()) is None

    def test_gemini_with_api_key(self):
        model = get_model(Settings(gemini_api_key="k", gemini_model="gemini-1.5-pro"))
        assert isinstance(model, GeminiModel)
        assert model.name == "gemini"
        assert model.model == "gemini-1.5-pro"
