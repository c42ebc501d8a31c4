"""Text helpers used when normalizing notes."""

import os
import re
from typing import Iterable, List, Optional


TRUNCATION_MARKER = "\n/* TRUNCATED */"

_MULTI_BLANK_RE = re.compile(r"\n{3,}")
_WS_RE = re.compile(r"\s+")
_EXT_RE = re.compile(r"\.[A-Za-z0-9_+-]{1,10}$")
_LANG_TOKEN_RE = re.compile(r"[^a-z0-9+#_-]")
_UNSAFE_FILENAME_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def normalize_text(text: Optional[str]) -> str:
    """Collapse runs of 3+ newlines to a blank line and trim."""
    if not text:
        return ""
    return _MULTI_BLANK_RE.sub("\n\n", text).strip()


def collapse_whitespace(text: Optional[str]) -> str:
    if not text:
        return ""
    return _WS_RE.sub(" ", text).strip()


def truncate_code(code: str, max_chars: int) -> str:
    """Cut *code* to *max_chars* and append the truncation marker if needed."""
    if len(code) <= max_chars:
        return code
    return code[:max_chars] + TRUNCATION_MARKER


def dedupe(items: Iterable[str]) -> List[str]:
    """Drop empty and repeated entries, keeping first-seen order."""
    seen = set()
    result: List[str] = []
    for item in items:
        if not item or item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def language_from_path(path: Optional[str], default: str = "unknown") -> str:
    """Lower-cased extension of *path* without the dot."""
    if not path:
        return default
    ext = os.path.splitext(os.path.basename(path))[1].lstrip(".").lower()
    return ext or default


def language_token(value: Optional[str], default: str = "plain") -> str:
    """Reduce a language hint to a short lowercase token."""
    token = _LANG_TOKEN_RE.sub("", (value or "").strip().lower())
    return token[:20] or default


def basename_without_ext(path: Optional[str], default: str = "unknown") -> str:
    base = os.path.basename(path or "")
    stem = os.path.splitext(base)[0]
    return stem or base or default


def strip_extension(title: str, source_path: Optional[str] = None) -> str:
    """Remove a file extension from a title.

    Only filename-shaped titles (no whitespace) lose a generic ``.ext``;
    prose titles lose only the extension of the analyzed file itself.
    """
    title = (title or "").strip()
    suffix = os.path.splitext(source_path or "")[1]
    if suffix and len(title) > len(suffix) and title.lower().endswith(suffix.lower()):
        return title[: -len(suffix)].rstrip()
    if title and not any(ch.isspace() for ch in title):
        stripped = _EXT_RE.sub("", title)
        return stripped or title
    return title


def safe_filename(title: str, default: str = "note") -> str:
    """Make a title usable as a file name."""
    cleaned = _UNSAFE_FILENAME_RE.sub("_", title or "").strip().strip(".")
    return cleaned[:150] or default


def preview_line(text: Optional[str], width: int = 120) -> str:
    problem = collapse_whitespace(text) or "not inferred"
    return problem[:width] + "..." if len(problem) > width else problem


__all__ = [
    "TRUNCATION_MARKER",
    "normalize_text",
    "collapse_whitespace",
    "truncate_code",
    "dedupe",
    "language_from_path",
    "language_token",
    "basename_without_ext",
    "strip_extension",
    "safe_filename",
    "preview_line",
]
