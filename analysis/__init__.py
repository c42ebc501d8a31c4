"""Heuristic inference engine.

Looks at raw source text and, without any external call, infers the
algorithm family, a title, pseudocode, complexity, edge cases, examples and
an explanation.

Components:
- extract_signals: regex probes producing ordered hints + leading comment
- infer_title / synthesize_pseudocode / estimate_complexity: priority tables
- collect_edge_cases / collect_examples: structural triggers + family cases
- compose_explanation: canned prose per family
- build_heuristic_note: runs all of the above and normalizes the result
"""

from .assembler import build_heuristic_note, normalize_note
from .classifier import NOT_INFERRED_TITLE, infer_title
from .complexity import UNKNOWN_COMPLEXITY, estimate_complexity
from .edge_cases import SEED_EDGE_CASES, collect_edge_cases, collect_examples
from .explanation import NOT_INFERRED_PROBLEM, compose_explanation
from .pseudocode import FALLBACK_PSEUDOCODE, synthesize_pseudocode
from .signals import Signals, extract_signals

__all__ = [
    "Signals",
    "extract_signals",
    "infer_title",
    "synthesize_pseudocode",
    "estimate_complexity",
    "collect_edge_cases",
    "collect_examples",
    "compose_explanation",
    "build_heuristic_note",
    "normalize_note",
    "NOT_INFERRED_TITLE",
    "NOT_INFERRED_PROBLEM",
    "UNKNOWN_COMPLEXITY",
    "FALLBACK_PSEUDOCODE",
    "SEED_EDGE_CASES",
]
