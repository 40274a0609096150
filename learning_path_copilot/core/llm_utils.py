"""
Helpers for reading text out of chat model responses.

Gemini may return message content either as a plain string or as a list of
content blocks ([{'type': 'text', 'text': '...'}]); both the path generator
and the chat session go through these helpers.
"""
import re

_CODE_FENCE_PATTERN = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL)


def extract_content_as_string(response) -> str:
    """
    Extract the text of an LLM response.

    Args:
        response: AIMessage-like object with a .content attribute, or raw content

    Returns:
        Content as a plain string ("" when the response carries nothing)
    """
    if response is None:
        return ""
    content = getattr(response, "content", response)
    return normalize_content_to_string(content)


def normalize_content_to_string(content) -> str:
    """
    Normalize any content type to a plain string.

    Handles:
    - Strings (returned as-is)
    - Lists of content blocks; text parts are concatenated without separators
      so a JSON document split across blocks stays parseable
    - Single dict content blocks
    - None (returned as "")
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        text_parts = []
        for item in content:
            if isinstance(item, dict):
                # Non-text blocks (e.g. thinking signatures) carry no text
                if "text" in item:
                    text_parts.append(item["text"])
            elif isinstance(item, str):
                text_parts.append(item)
        return "".join(text_parts)
    if isinstance(content, dict):
        return content.get("text", "")
    return str(content)


def strip_code_fence(text: str) -> str:
    """Remove a surrounding ```json ... ``` fence if the model added one."""
    match = _CODE_FENCE_PATTERN.match(text)
    if match:
        return match.group(1)
    return text
