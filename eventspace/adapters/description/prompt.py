"""Prompt and error text shared by the description adapters."""

from eventspace.core.ports import DESCRIPTION_ERROR_PREFIX

GENERATION_ERROR_MESSAGE = (
    f"{DESCRIPTION_ERROR_PREFIX} Could not generate a description at this time."
)


def build_description_prompt(keywords: str) -> str:
    """Build the generation prompt for a set of keywords."""
    return f"""Based on the following keywords, write a compelling and professional event space description of about 50-70 words.
The tone should be inviting and highlight the key features. Do not use markdown.

Keywords: "{keywords.strip()}"

Description:
"""
