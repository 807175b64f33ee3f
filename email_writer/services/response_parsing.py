import json
from typing import Any

from ..errors import ParseError, UpstreamError


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def extract_email_text(body_text: str) -> str:
    """Pull `candidates[0].content.parts[0].text` out of a generateContent body."""
    try:
        data = json.loads(body_text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ParseError(f"Failed to parse API response: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError("Failed to parse API response: expected a JSON object")

    candidate = _first(data.get("candidates"))
    if candidate is None:
        raise UpstreamError("No candidates found in Gemini API response")

    content = candidate.get("content") if isinstance(candidate, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    part = _first(parts)
    if part is None:
        raise UpstreamError("No parts found in Gemini API response")

    text = part.get("text") if isinstance(part, dict) else None
    if not isinstance(text, str) or not text.strip():
        raise UpstreamError("Empty response from Gemini API")
    return text.strip()
