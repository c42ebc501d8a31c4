"""Title inference from hints and the leading comment."""

import re
from typing import List

from .rules import (
    Rule,
    first_match,
    has_nested_loops,
    is_binary_search,
    is_dynamic_programming,
    is_graph_traversal,
    is_heap,
    is_recursive,
    is_selection_sort,
    is_sliding_window,
    is_sorting,
    is_two_pointers,
    is_union_find,
)
from .signals import Signals


NOT_INFERRED_TITLE = "Problem not confidently inferred"

COMMENT_TITLE_MIN = 6
COMMENT_TITLE_MAX = 199

_AUTHOR_RE = re.compile(r"^@?author\s*:", re.I)

# Specific signatures must precede the generic ones they are supersets of.
TITLE_RULES: List[Rule] = [
    Rule("binary_search", is_binary_search, "Binary Search (likely)"),
    Rule("selection_sort", is_selection_sort, "Selection Sort (likely)"),
    Rule("sorting", is_sorting, "Sorting Problem (likely)"),
    Rule("graph_traversal", is_graph_traversal, "Graph Traversal (DFS/BFS)"),
    Rule("dynamic_programming", is_dynamic_programming, "Dynamic Programming Problem (likely)"),
    Rule("union_find", is_union_find, "Disjoint Set Union / Union-Find (likely)"),
    Rule("heap", is_heap, "Heap / Priority Queue Problem (likely)"),
    Rule("recursive", is_recursive, "Divide and Conquer / Recursion (likely)"),
    Rule("nested_loops", has_nested_loops, "Quadratic Nested-Loop Pattern (likely)"),
    # Technique titles apply only when no family above matched.
    Rule("sliding_window", is_sliding_window, "Sliding Window (likely)"),
    Rule("two_pointers", is_two_pointers, "Two Pointers (likely)"),
]


def is_author_label(line: str) -> bool:
    return bool(_AUTHOR_RE.match(line.strip()))


def comment_title(top_comment: str) -> str:
    """First line of the leading comment when it is usable as a title, else ""."""
    if not top_comment:
        return ""
    first_line = top_comment.splitlines()[0].strip()
    if not COMMENT_TITLE_MIN <= len(first_line) <= COMMENT_TITLE_MAX:
        return ""
    if is_author_label(first_line):
        return ""
    return first_line


def infer_title(signals: Signals) -> str:
    """
    Pick one title for the analyzed source.

    Order: usable leading comment, then the priority table, then a title
    synthesized from the first hint, then the sentinel.
    """
    from_comment = comment_title(signals.top_comment)
    if from_comment:
        return from_comment

    title = first_match(TITLE_RULES, signals)
    if title:
        return title

    if signals.hints:
        first = signals.hints[0]
        return f"{first[:1].upper()}{first[1:]} problem (inferred)"

    return NOT_INFERRED_TITLE


__all__ = ["NOT_INFERRED_TITLE", "TITLE_RULES", "is_author_label", "comment_title", "infer_title"]
