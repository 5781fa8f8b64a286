"""Client for the generative text service."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from google import genai

from wordsmith.config import Settings, get_settings
from wordsmith.errors import UpstreamError


LOGGER = logging.getLogger(__name__)

INVALID_KEY_MARKER = "API_KEY_INVALID"
INVALID_KEY_MESSAGE = "Invalid API key. Please check your Gemini API key."


class CompletionClient(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class GeminiCompletionClient:
    """Sends one prompt per call and returns the response text."""

    def __init__(self, api_key: Optional[str], model: str) -> None:
        self.api_key = api_key
        self.model = model
        self._client: Optional[genai.Client] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GeminiCompletionClient":
        settings = settings or get_settings()
        return cls(api_key=settings.api_key, model=settings.model)

    def _get_client(self) -> genai.Client:
        if not self.api_key:
            raise UpstreamError("Gemini API key is not configured")
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as exc:
            message = str(exc)
            LOGGER.error("Completion request failed: %s", message)
            if INVALID_KEY_MARKER in message:
                raise UpstreamError(INVALID_KEY_MESSAGE) from exc
            raise UpstreamError(message) from exc
        return response.text or ""
