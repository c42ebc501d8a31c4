"""Read a source file into a SourceUnit."""

from domain import SourceUnit
from shared.exceptions import SourceReadError
from shared.text_utils import language_from_path


def load_source(path: str) -> SourceUnit:
    """
    Read the whole file at *path*.

    Args:
        path: File to read (any language, decoded as UTF-8)

    Returns:
        SourceUnit with the language tag inferred from the extension

    Raises:
        SourceReadError: If the file is missing or unreadable
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as handle:
            content = handle.read()
    except OSError as exc:
        raise SourceReadError(path, exc.strerror or str(exc)) from exc
    return SourceUnit(content=content, language=language_from_path(path), path=path)


def source_from_text(content: str, path: str = "") -> SourceUnit:
    """Wrap in-memory text as a SourceUnit."""
    return SourceUnit(content=content or "", language=language_from_path(path), path=path)


__all__ = ["load_source", "source_from_text"]
