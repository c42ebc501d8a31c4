"""Exception hierarchy for code notes."""


class NotesError(Exception):
    """Base class for all note generation errors."""


class SourceReadError(NotesError):
    """Source file could not be read. Fatal for the run."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"cannot read {path}: {message}")


class GenerationError(NotesError):
    """An LLM stage failed (network, empty reply or unparsable output)."""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        self.message = message
        super().__init__(f"stage '{stage}' failed: {message}")


class PublishError(NotesError):
    """Publishing a note to the document workspace failed."""


__all__ = ["NotesError", "SourceReadError", "GenerationError", "PublishError"]
