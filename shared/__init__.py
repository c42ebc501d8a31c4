"""Shared utilities and configuration for code notes."""

from .config import NotesConfig, load_config
from .exceptions import GenerationError, NotesError, PublishError, SourceReadError
from .text_utils import TRUNCATION_MARKER, normalize_text, truncate_code

__all__ = [
    "load_config",
    "NotesConfig",
    "NotesError",
    "SourceReadError",
    "GenerationError",
    "PublishError",
    "TRUNCATION_MARKER",
    "normalize_text",
    "truncate_code",
]
