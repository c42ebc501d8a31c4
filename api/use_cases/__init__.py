"""Use cases orchestrating the analysis, generation and publishing layers."""

from .notes import NoteUseCase, to_json

__all__ = ["NoteUseCase", "to_json"]
