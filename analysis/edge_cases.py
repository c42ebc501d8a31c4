"""Edge-case and example collection.

Edge cases come from three places, in this order: the fixed seeds, structural
triggers found in the snippet, and cases specific to the detected families.
The result is de-duplicated; examples are at most one canned entry.
"""

import re
from typing import Callable, List, Tuple

from domain import Example

from .rules import (
    Rule,
    first_match,
    is_binary_search,
    is_dfs,
    is_dynamic_programming,
    is_graph_traversal,
    is_sliding_window,
    is_sorting,
    is_two_pointers,
)
from .signals import Signals, has_self_call
from shared.text_utils import dedupe


SEED_EDGE_CASES = ("empty input", "single element", "duplicates")

ZERO_LENGTH_CASE = "zero-length input (n == 0)"
NEGATIVE_CASE = "negative numbers"
NULL_CASE = "null / None input"
RECURSION_CASE = "deep recursion (stack depth limit)"
MISSING_KEY_CASE = "missing key in map lookup"
OVERFLOW_CASE = "integer overflow on large values"
SORTED_INPUT_CASE = "array must be sorted"
OFF_BY_ONE_CASE = "off-by-one at the search boundaries"

_ZERO_CHECK_RE = re.compile(
    r"[=!]==?\s*0\b|\b0\s*[=!]==?|(?:\blen\s*\([^)\n]*\)|\.length\b|\.size\s*\(\s*\))\s*[=!]==?"
)
_NEGATIVE_RE = re.compile(r"\w\s*\[[^\]\n]*\][^\n]*<\s*0\b|<\s*0\b[^\n]*\w\s*\[")
_NULL_RE = re.compile(r"\b(?:null|nullptr|NULL|None|nil|undefined)\b")
_MAP_RE = re.compile(
    r"\bunordered_map\b|\bmap\s*<|\bhash_?map\b|\btreemap\b|\bdefaultdict\b"
    r"|\bdict\s*[(\[]|:\s*dict\b|\bnew\s+map\b|\bcounter\s*\(",
    re.I,
)
_OVERFLOW_RE = re.compile(
    r"\boverflow\b|\b(?:INT|LONG|LLONG|UINT|ULLONG)_(?:MAX|MIN)\b|Integer\.(?:MAX|MIN)_VALUE"
    r"|Long\.(?:MAX|MIN)_VALUE|Number\.MAX_SAFE_INTEGER|sys\.maxsize|\b2147483647\b|\b1e(?:9|18)\b",
    re.I,
)
_BOUNDARY_TOKEN_RES = tuple(re.compile(rf"\b{token}\b", re.I) for token in ("left", "right", "mid"))
_INCLUSIVE_WHILE_RE = re.compile(r"\bwhile\s*\(?\s*[\w.\[\]]+\s*<=\s*[\w.\[\]]+", re.I)


def _has_search_boundaries(snippet: str) -> bool:
    return all(pattern.search(snippet) for pattern in _BOUNDARY_TOKEN_RES) and bool(
        _INCLUSIVE_WHILE_RE.search(snippet)
    )


EDGE_CASE_TRIGGERS: List[Tuple[Callable[[str], bool], Tuple[str, ...]]] = [
    (lambda s: bool(_ZERO_CHECK_RE.search(s)), (ZERO_LENGTH_CASE,)),
    (lambda s: bool(_NEGATIVE_RE.search(s)), (NEGATIVE_CASE,)),
    (lambda s: bool(_NULL_RE.search(s)), (NULL_CASE,)),
    (has_self_call, (RECURSION_CASE,)),
    (lambda s: bool(_MAP_RE.search(s)), (MISSING_KEY_CASE,)),
    (lambda s: bool(_OVERFLOW_RE.search(s)), (OVERFLOW_CASE,)),
    (_has_search_boundaries, (SORTED_INPUT_CASE, OFF_BY_ONE_CASE)),
]

FAMILY_EDGE_CASES: List[Rule] = [
    Rule(
        "sorting",
        is_sorting,
        ("already sorted input", "reverse sorted input", "all elements equal", "large n (quadratic comparisons)"),
    ),
    Rule("binary_search", is_binary_search, ("target not present", "target at first or last position")),
    Rule("graph_traversal", is_graph_traversal, ("disconnected graph", "cycles")),
    Rule("dynamic_programming", is_dynamic_programming, ("base cases",)),
    Rule("sliding_window", is_sliding_window, ("window larger than array", "minimum window size", "no valid window")),
    Rule("two_pointers", is_two_pointers, ("all elements equal", "pointers meeting at the same index")),
]

EXAMPLE_RULES: List[Rule] = [
    Rule(
        "binary_search",
        is_binary_search,
        Example(
            input="arr = [1, 3, 5, 7, 9, 11], target = 7",
            output="3",
            note="Index of the target in the sorted array; -1 when absent",
        ),
    ),
    Rule(
        "sorting",
        is_sorting,
        Example(
            input="[64, 25, 12, 22, 11]",
            output="[11, 12, 22, 25, 64]",
            note="Elements rearranged in non-decreasing order",
        ),
    ),
    Rule(
        "dfs",
        is_dfs,
        Example(
            input="edges = [(0, 1), (0, 2), (1, 3)], start = 0",
            output="0 1 3 2",
            note="Depth-first visit order from vertex 0",
        ),
    ),
    Rule(
        "dynamic_programming",
        is_dynamic_programming,
        Example(
            input="n = 10 (Fibonacci)",
            output="55",
            note="Each state reuses the two previously computed states",
        ),
    ),
]


def collect_edge_cases(signals: Signals) -> List[str]:
    """Seeds, snippet triggers and family cases, duplicate-free."""
    cases: List[str] = list(SEED_EDGE_CASES)
    for trigger, added in EDGE_CASE_TRIGGERS:
        if trigger(signals.snippet):
            cases.extend(added)
    for rule in FAMILY_EDGE_CASES:
        if rule.predicate(signals):
            cases.extend(rule.value)
    return dedupe(cases)


def collect_examples(signals: Signals) -> List[Example]:
    example = first_match(EXAMPLE_RULES, signals)
    if example is None:
        return []
    return [Example(input=example.input, output=example.output, note=example.note)]


__all__ = [
    "SEED_EDGE_CASES",
    "SORTED_INPUT_CASE",
    "OFF_BY_ONE_CASE",
    "EDGE_CASE_TRIGGERS",
    "FAMILY_EDGE_CASES",
    "EXAMPLE_RULES",
    "collect_edge_cases",
    "collect_examples",
]
