"""Description adapters for AI-generated venue descriptions.

Implementations support multiple text-generation providers:
- Gemini REST API (httpx)
- OpenAI API
- Disabled (no provider configured)
"""

from .disabled import NOT_CONFIGURED_MESSAGE, DisabledDescriptionAdapter
from .gemini import GeminiDescriptionAdapter
from .prompt import GENERATION_ERROR_MESSAGE, build_description_prompt

__all__ = [
    "DisabledDescriptionAdapter",
    "GENERATION_ERROR_MESSAGE",
    "GeminiDescriptionAdapter",
    "NOT_CONFIGURED_MESSAGE",
    "build_description_prompt",
]
