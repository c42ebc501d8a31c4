"""Time/space complexity estimate from hints."""

from typing import List

from .rules import (
    Rule,
    first_match,
    has_nested_loops,
    is_binary_search,
    is_dynamic_programming,
    is_heap,
    is_merge_sort,
    is_quick_sort,
    is_recursive,
    is_sliding_window,
    is_two_pointers,
)
from .signals import Signals


UNKNOWN_COMPLEXITY = "Time: unknown (heuristic), Space: unknown (heuristic)"

# Nested loops outrank every milder hint except binary search.
COMPLEXITY_RULES: List[Rule] = [
    Rule("binary_search", is_binary_search, "Time: O(log n), Space: O(1)"),
    Rule("nested_loops", has_nested_loops, "Time: O(n^2), Space: O(1) (or unknown)"),
    Rule(
        "dynamic_programming",
        is_dynamic_programming,
        "Time: O(n*m) (number of DP states x transition cost), Space: O(n*m) for the table",
    ),
    Rule("heap", is_heap, "Time: O(n log n) typical, Space: O(n)"),
    Rule(
        "recursive",
        is_recursive,
        "Time: depends on recursion branching, Space: O(depth) call stack",
    ),
    # Technique estimates apply only when none of the rules above matched.
    Rule(
        "quick_sort",
        is_quick_sort,
        "Time: O(n log n) average, O(n^2) worst case, Space: O(log n)",
    ),
    Rule("merge_sort", is_merge_sort, "Time: O(n log n), Space: O(n)"),
    Rule("sliding_window", is_sliding_window, "Time: O(n), Space: O(1) or O(k) for the window"),
    Rule("two_pointers", is_two_pointers, "Time: O(n), Space: O(1)"),
]


def estimate_complexity(signals: Signals) -> str:
    return first_match(COMPLEXITY_RULES, signals, UNKNOWN_COMPLEXITY)


__all__ = ["COMPLEXITY_RULES", "UNKNOWN_COMPLEXITY", "estimate_complexity"]
