"""Gemini description adapter.

Implements DescriptionPort by calling the Gemini `generateContent` REST
endpoint and returning the generated text.
"""

import logging
from typing import Any

import httpx

from eventspace.core.ports import DescriptionPort

from .prompt import GENERATION_ERROR_MESSAGE, build_description_prompt

logger = logging.getLogger(__name__)


class GeminiDescriptionAdapter(DescriptionPort):
    """Gemini-backed description generator via REST API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        api_url: str = "https://generativelanguage.googleapis.com",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Gemini adapter.

        Args:
            api_key: Gemini API key.
            model: Gemini model name.
            api_url: Base URL of the Generative Language API.
            timeout_seconds: Request timeout.
            transport: Optional httpx transport (used by tests).

        Raises:
            ValueError: If API key is empty or not provided.
        """
        if not api_key or not api_key.strip():
            raise ValueError(
                "Gemini API key must be provided and non-empty. "
                "Set GEMINI_API_KEY environment variable."
            )
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.client = httpx.AsyncClient(
            base_url=self.api_url,
            headers=self._get_headers(),
            timeout=timeout_seconds,
            transport=transport,
        )

    def _get_headers(self) -> dict[str, str]:
        """Build request headers."""
        return {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def close(self) -> None:
        """Close the httpx client and clean up resources."""
        await self.client.aclose()

    async def generate_description(self, keywords: str) -> str:
        """Generate a venue description, or an error message on failure."""
        if not keywords.strip():
            return ""

        try:
            response = await self.client.post(
                f"/v1beta/models/{self.model}:generateContent",
                json={
                    "contents": [
                        {"parts": [{"text": build_description_prompt(keywords)}]}
                    ],
                },
            )
            response.raise_for_status()
            return self._extract_text(response.json())

        except httpx.HTTPError as e:
            logger.error(f"Failed to generate description via Gemini: {e}", exc_info=True)
            return GENERATION_ERROR_MESSAGE
        except ValueError as e:
            logger.error(f"Failed to parse Gemini response: {e}", exc_info=True)
            return GENERATION_ERROR_MESSAGE

    @staticmethod
    def _extract_text(data: dict[str, Any]) -> str:
        """Join the text parts of the first candidate.

        Raises:
            ValueError: If the response has no text.
        """
        candidates = data.get("candidates") or []
        if not candidates:
            raise ValueError("Gemini response contained no candidates")

        parts = candidates[0].get("content", {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts).strip()
        if not text:
            raise ValueError("Gemini response contained no text")
        return text
