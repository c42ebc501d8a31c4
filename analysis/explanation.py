"""Canned prose: problem statement, approach and explanation per family."""

from typing import Dict, List, Tuple

from shared.text_utils import collapse_whitespace

from .classifier import TITLE_RULES, is_author_label
from .rules import (
    Rule,
    first_match,
    is_binary_search,
    is_dfs,
    is_dynamic_programming,
    is_merge_sort,
    is_quick_sort,
    is_selection_sort,
    matching_rule,
)
from .signals import Signals


NOT_INFERRED_PROBLEM = "not inferred"

PROBLEM_STATEMENTS: Dict[str, str] = {
    "binary_search": "Locate a target value (or a boundary) in a sorted search space.",
    "selection_sort": "Sort a sequence of values into non-decreasing order.",
    "sorting": "Order the input values and solve the task on the sorted data.",
    "graph_traversal": "Visit the vertices of a graph reachable from a start vertex.",
    "dynamic_programming": "Compute an optimal or counted answer from overlapping subproblems.",
    "union_find": "Track connected components under a sequence of merge operations.",
    "heap": "Repeatedly extract the smallest or largest pending element.",
    "recursive": "Solve the problem by reducing it to smaller instances of itself.",
    "nested_loops": "Examine pairs of elements of the input.",
    "quick_sort": "Sort a sequence of values by partitioning it around pivots.",
    "merge_sort": "Sort a sequence of values by merging sorted halves.",
    "sliding_window": "Find the best contiguous window (subarray or substring) of the input.",
    "two_pointers": "Find a pair or range in the input by moving two indices toward each other.",
}

APPROACHES: Dict[str, str] = {
    "binary_search": (
        "Binary search: keep a [low, high] interval that must contain the answer and halve it "
        "each step by comparing against the middle element."
    ),
    "selection_sort": (
        "Selection sort: for each position, scan the unsorted suffix for its minimum and swap "
        "it into place."
    ),
    "sorting": "Sorting: order the data first so the rest of the work becomes a linear scan.",
    "graph_traversal": (
        "Graph traversal: explore vertices from a start point with DFS (stack/recursion) or "
        "BFS (queue), marking each vertex visited once."
    ),
    "dynamic_programming": (
        "Dynamic programming: define states, fill them from base cases in dependency order, "
        "and reuse stored results instead of recomputing them."
    ),
    "union_find": (
        "Union-Find: keep a parent forest with path compression and union by rank so that "
        "merge and find are nearly constant time."
    ),
    "heap": "Heap: keep candidates in a priority queue and always process the best one next.",
    "recursive": "Divide and conquer: split the input, recurse on the parts, and combine.",
    "nested_loops": "Brute force: compare every relevant pair with two nested loops.",
    "quick_sort": (
        "Quick sort: partition the range around a pivot so smaller values come first, then "
        "sort both sides the same way."
    ),
    "merge_sort": (
        "Merge sort: split the range in half, sort each half, and merge the two sorted halves "
        "with a linear scan."
    ),
    "sliding_window": (
        "Sliding window: grow the window on the right, shrink it on the left while it is "
        "invalid, and update the answer once per step."
    ),
    "two_pointers": (
        "Two pointers: start one index at each end and move the one that cannot be part of "
        "the answer."
    ),
}

BINARY_SEARCH_EXPLANATION = """The code searches a sorted range by repeatedly comparing the target with the middle element. Every comparison discards half of the remaining candidates, so at most about log2(n) iterations are needed.

The loop keeps low and high as inclusive bounds. When the middle value is too small the search continues to the right of mid, when it is too large it continues to the left, and the loop stops once the bounds cross.

Correctness depends on the input being sorted and on updating the bounds past mid, otherwise the loop can stall or skip the answer."""

SELECTION_SORT_EXPLANATION = """The code sorts the array in place with selection sort. The outer loop fixes one position at a time, from the front of the array to the back.

For each position the inner loop scans the unsorted remainder for the smallest element, remembering its index. After the scan, that element is swapped into the current position, so the prefix of the array is always sorted.

The number of comparisons is quadratic regardless of the input order, while the number of swaps is at most n - 1."""

DFS_EXPLANATION = """The code performs a depth-first search. Starting from a vertex, it follows one edge as far as possible before backtracking to try the next alternative.

A visited marker prevents processing a vertex twice, which keeps the traversal linear in the number of vertices and edges and protects against cycles.

The recursion (or explicit stack) depth can reach the number of vertices on long paths."""

DP_EXPLANATION = """The code uses dynamic programming. The answer for a larger input is expressed in terms of answers for smaller inputs, and those answers are stored so each one is computed only once.

Base cases are filled in first, then states are evaluated in an order where every dependency is already known.

Time is the number of states times the work per transition, and memory is the size of the table unless it is compressed."""

# (rule, title keywords that also select the family)
EXPLANATION_RULES: List[Tuple[Rule, Tuple[str, ...]]] = [
    (Rule("binary_search", is_binary_search, BINARY_SEARCH_EXPLANATION), ("binary search",)),
    (Rule("selection_sort", is_selection_sort, SELECTION_SORT_EXPLANATION), ("selection sort",)),
    (Rule("dfs", is_dfs, DFS_EXPLANATION), ("depth-first", "depth first")),
    (Rule("dynamic_programming", is_dynamic_programming, DP_EXPLANATION), ("dynamic programming",)),
]


# Narrow the generic sorting family when a subtype is recognizable.
SORT_SUBTYPE_RULES: List[Rule] = [
    Rule("quick_sort", is_quick_sort, "quick_sort"),
    Rule("merge_sort", is_merge_sort, "merge_sort"),
]


def dominant_family(signals: Signals) -> str:
    rule = matching_rule(TITLE_RULES, signals)
    if rule is None:
        return ""
    if rule.name == "sorting":
        return first_match(SORT_SUBTYPE_RULES, signals, rule.name)
    return rule.name


def describe_problem(signals: Signals) -> str:
    """Leading comment (unless it is an author label), else a family statement."""
    comment = signals.top_comment
    if comment and not is_author_label(comment.splitlines()[0]):
        return collapse_whitespace(comment)
    return PROBLEM_STATEMENTS.get(dominant_family(signals), NOT_INFERRED_PROBLEM)


def describe_approach(signals: Signals) -> str:
    return APPROACHES.get(dominant_family(signals), "")


def compose_explanation(title: str, signals: Signals) -> str:
    """Static explanation for the matched family, or "" when none matches."""
    lowered = (title or "").lower()
    for rule, keywords in EXPLANATION_RULES:
        if any(keyword in lowered for keyword in keywords) or rule.predicate(signals):
            return rule.value
    return ""


__all__ = [
    "NOT_INFERRED_PROBLEM",
    "PROBLEM_STATEMENTS",
    "APPROACHES",
    "EXPLANATION_RULES",
    "SORT_SUBTYPE_RULES",
    "dominant_family",
    "describe_problem",
    "describe_approach",
    "compose_explanation",
]
