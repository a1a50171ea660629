"""
Completion model interface and adapters.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

from .config import DEFAULT_MODEL, Settings

logger = logging.getLogger(__name__)


class CompletionModel(ABC):
    """A generative model that turns a prompt into free text."""

    def __init__(self, model: Optional[str] = None):
        self.model = model
        self.name = self.__class__.__name__.replace("Model", "").lower()

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Generate a completion for a prompt.

        Args:
            prompt: Prompt text

        Returns:
            The model's text response
        """
        pass


class GeminiModel(CompletionModel):
    """Google Gemini model via google-generativeai."""

    def __init__(self, api_key: str, model: Optional[str] = None):
        super().__init__(model or DEFAULT_MODEL)
        self.name = "gemini"
        self.api_key = api_key
        self._client = None

    def _get_client(self):
        if self._client is None:
            import google.generativeai as genai
            genai.configure(api_key=self.api_key)
            self._client = genai.GenerativeModel(self.model)
        return self._client

    def generate(self, prompt: str) -> str:
        start_time = time.time()
        response = self._get_client().generate_content(prompt)

        duration_ms = int((time.time() - start_time) * 1000)
        logger.debug(f"Gemini API call completed in {duration_ms}ms")

        return response.text


def get_model(settings: Settings) -> Optional[CompletionModel]:
    """Return the configured model, or None when no API key is set."""
    if not settings.gemini_api_key:
        logger.warning("Gemini API key not found")
        return None
    return GeminiModel(settings.gemini_api_key, settings.gemini_model)
