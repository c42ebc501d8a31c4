"""Heuristic note assembly and note normalization.

``build_heuristic_note`` runs the extractor and every rule table in a fixed
order and never raises on unrecognized input. ``normalize_note`` is applied
to notes from every mode so that savers and publishers see one shape.
"""

from typing import Optional

from domain import Example, Note, SourceUnit
from shared.config import DEFAULT_MAX_CODE_CHARS
from shared.text_utils import (
    basename_without_ext,
    dedupe,
    language_from_path,
    language_token,
    normalize_text,
    strip_extension,
    truncate_code,
)

from .classifier import infer_title
from .complexity import estimate_complexity
from .edge_cases import collect_edge_cases, collect_examples
from .explanation import (
    NOT_INFERRED_PROBLEM,
    compose_explanation,
    describe_approach,
    describe_problem,
)
from .pseudocode import synthesize_pseudocode
from .signals import extract_signals


def build_heuristic_note(source: SourceUnit, max_chars: int = DEFAULT_MAX_CODE_CHARS) -> Note:
    """
    Produce a fully populated note without any external call.

    Args:
        source: Source text and language tag
        max_chars: Scan budget and stored-code budget

    Returns:
        Normalized Note
    """
    code = source.content or ""
    signals = extract_signals(code, max_chars)

    title = infer_title(signals)
    note = Note(
        title=title,
        language=source.language,
        problem=describe_problem(signals),
        approach=describe_approach(signals),
        pseudocode=synthesize_pseudocode(signals),
        complexity=estimate_complexity(signals),
        edge_cases=collect_edge_cases(signals),
        examples=collect_examples(signals),
        explanation=compose_explanation(title, signals),
        code=code,
    )
    return normalize_note(note, source, max_chars)


def normalize_note(
    note: Note,
    source: Optional[SourceUnit] = None,
    max_code_chars: int = DEFAULT_MAX_CODE_CHARS,
) -> Note:
    """
    Coerce every field to its documented type and shape.

    Args:
        note: Note from any mode (fields may be empty)
        source: Source the note describes; supplies fallbacks
        max_code_chars: Stored-code budget

    Returns:
        A new Note; *note* is left untouched
    """
    path = source.path if source else ""
    original_code = source.content if source else ""

    title = strip_extension((note.title or "").strip() or basename_without_ext(path), path)
    language = language_token(note.language or language_from_path(path, "plain"))

    examples = []
    for example in note.examples or []:
        cleaned = Example(
            input=normalize_text(example.input),
            output=normalize_text(example.output),
            note=normalize_text(example.note),
        )
        if not cleaned.is_empty():
            examples.append(cleaned)

    return Note(
        title=title or basename_without_ext(path),
        language=language,
        problem=normalize_text(note.problem) or NOT_INFERRED_PROBLEM,
        approach=normalize_text(note.approach),
        pseudocode=normalize_text(note.pseudocode),
        complexity=normalize_text(note.complexity),
        edge_cases=dedupe(normalize_text(case) for case in note.edge_cases or []),
        examples=examples,
        explanation=normalize_text(note.explanation),
        code=truncate_code(note.code or original_code or "", max_code_chars),
    )


__all__ = ["build_heuristic_note", "normalize_note"]
