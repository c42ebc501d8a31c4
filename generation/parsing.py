"""Parsing helpers for LLM replies."""

import json
import re
from typing import Optional


_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.S)


def parse_json_response(content: str) -> Optional[dict]:
    """Parse LLM response as a JSON object.

    Args:
        content: LLM response text

    Returns:
        Parsed dict or None if parsing fails
    """
    content = (content or "").strip()

    # Remove markdown code blocks if present
    if content.startswith("```"):
        lines = content.split("\n")
        content = "\n".join(lines[1:-1] if lines[-1].strip() == "```" else lines[1:])

    # Try direct JSON parse
    try:
        parsed = json.loads(content)
        return parsed if isinstance(parsed, dict) else None
    except json.JSONDecodeError:
        pass

    # Try to find JSON object in text
    match = _JSON_OBJECT_RE.search(content)
    if match:
        try:
            parsed = json.loads(match.group())
            return parsed if isinstance(parsed, dict) else None
        except json.JSONDecodeError:
            pass

    return None


def strip_code_fences(content: str) -> str:
    """Drop a surrounding markdown fence from a prose reply."""
    content = (content or "").strip()
    if content.startswith("```") and content.endswith("```"):
        lines = content.split("\n")
        return "\n".join(lines[1:-1]).strip()
    return content


__all__ = ["parse_json_response", "strip_code_fences"]
