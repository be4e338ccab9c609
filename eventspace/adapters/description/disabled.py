"""Fallback description adapter used when no provider is configured."""

from eventspace.core.ports import DESCRIPTION_ERROR_PREFIX, DescriptionPort

NOT_CONFIGURED_MESSAGE = (
    f"{DESCRIPTION_ERROR_PREFIX} AI description helper is not configured. "
    "Set DESCRIPTION_BACKEND to 'gemini' or 'openai'."
)


class DisabledDescriptionAdapter(DescriptionPort):
    """Returns a not-configured message instead of generating text."""

    async def generate_description(self, keywords: str) -> str:
        if not keywords.strip():
            return ""
        return NOT_CONFIGURED_MESSAGE
