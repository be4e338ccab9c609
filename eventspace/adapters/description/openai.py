"""OpenAI description adapter.

Implements DescriptionPort by invoking the OpenAI chat completions API
(gpt-4o-mini, gpt-4o, etc.) for venue description suggestions.
"""

import asyncio
import logging
from typing import Any

from eventspace.core.ports import DescriptionPort

from .prompt import GENERATION_ERROR_MESSAGE, build_description_prompt

logger = logging.getLogger(__name__)


class OpenAIDescriptionAdapter(DescriptionPort):
    """OpenAI API-based description adapter."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        timeout_seconds: float = 30.0,
    ):
        """Initialize OpenAI description adapter.

        Args:
            api_key: OpenAI API key.
            model: OpenAI model to use (e.g., 'gpt-4o-mini', 'gpt-4o').
            timeout_seconds: Request timeout.

        Raises:
            ValueError: If API key is empty or not provided.
        """
        if not api_key or not api_key.strip():
            raise ValueError(
                "OpenAI API key must be provided and non-empty. "
                "Set OPENAI_API_KEY environment variable."
            )
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds

        # Lazy import to avoid requiring openai if not used
        self._client: Any | None = None

    def _get_client(self) -> Any:
        """Get or initialize the OpenAI synchronous client."""
        if self._client is None:
            try:
                from openai import OpenAI
                self._client = OpenAI(api_key=self.api_key)
            except ImportError:
                raise ImportError(
                    "openai package required for OpenAI adapter. "
                    "Install with: pip install openai"
                )
        return self._client

    async def generate_description(self, keywords: str) -> str:
        """Generate a venue description, or an error message on failure."""
        if not keywords.strip():
            return ""

        try:
            client = self._get_client()
            prompt = build_description_prompt(keywords)

            def _call_openai() -> str:
                """Synchronous wrapper for OpenAI API call."""
                response = client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {
                            "role": "system",
                            "content": "You write short marketing copy for event venues. "
                                       "Respond with plain text only.",
                        },
                        {
                            "role": "user",
                            "content": prompt,
                        },
                    ],
                    temperature=0.7,
                    timeout=self.timeout_seconds,
                )

                if response.choices and response.choices[0].message.content:
                    return response.choices[0].message.content
                raise RuntimeError("OpenAI API returned empty response")

            # Run in executor to avoid blocking the event loop
            loop = asyncio.get_running_loop()
            output = await loop.run_in_executor(None, _call_openai)
            return output.strip()

        except Exception as e:
            logger.error(f"Failed to generate description via OpenAI: {e}", exc_info=True)
            return GENERATION_ERROR_MESSAGE
