"""Domain entities for code notes."""

from .models import Example, Note, SourceUnit

__all__ = ["SourceUnit", "Example", "Note"]
