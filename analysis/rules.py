"""Priority-ordered rule tables.

Each component of the heuristic core is a list of ``Rule`` entries evaluated
top to bottom; the first predicate that holds decides the result. The
family predicates below are shared so that title, pseudocode, complexity,
examples and explanation stay keyed to the same signals.
"""

from typing import Any, Callable, NamedTuple, Optional, Sequence

from .signals import (
    BFS,
    DFS,
    DYNAMIC_PROGRAMMING,
    IN_PLACE_SWAP,
    MERGE_SORT,
    NESTED_LOOPS,
    QUICK_SORT,
    SLIDING_WINDOW,
    SORTING,
    TWO_POINTERS,
    Signals,
)

Predicate = Callable[[Signals], bool]


class Rule(NamedTuple):
    name: str
    predicate: Predicate
    value: Any


def first_match(rules: Sequence[Rule], signals: Signals, default: Any = None) -> Any:
    """Return the value of the first rule whose predicate holds."""
    rule = matching_rule(rules, signals)
    return rule.value if rule is not None else default


def matching_rule(rules: Sequence[Rule], signals: Signals) -> Optional[Rule]:
    for rule in rules:
        if rule.predicate(signals):
            return rule
    return None


def is_binary_search(signals: Signals) -> bool:
    return "binary search" in signals.hint_text


def is_selection_sort(signals: Signals) -> bool:
    return all(signals.has(hint) for hint in (SORTING, IN_PLACE_SWAP, NESTED_LOOPS))


def is_sorting(signals: Signals) -> bool:
    return "sorting" in signals.hint_text


def is_graph_traversal(signals: Signals) -> bool:
    text = signals.hint_text
    return "dfs" in text or "bfs" in text or "graph traversal" in text


def is_dfs(signals: Signals) -> bool:
    return signals.has(DFS)


def is_bfs(signals: Signals) -> bool:
    return signals.has(BFS)


def is_dynamic_programming(signals: Signals) -> bool:
    return "dynamic programming" in signals.hint_text or signals.has(DYNAMIC_PROGRAMMING)


def is_union_find(signals: Signals) -> bool:
    return "union-find" in signals.hint_text


def is_heap(signals: Signals) -> bool:
    return "heap" in signals.hint_text


def is_recursive(signals: Signals) -> bool:
    return "recursive" in signals.hint_text


def has_nested_loops(signals: Signals) -> bool:
    return signals.nested_loops or "nested loops" in signals.hint_text


def is_quick_sort(signals: Signals) -> bool:
    return is_sorting(signals) and signals.has(QUICK_SORT)


def is_merge_sort(signals: Signals) -> bool:
    return is_sorting(signals) and signals.has(MERGE_SORT)


def is_two_pointers(signals: Signals) -> bool:
    return signals.has(TWO_POINTERS)


def is_sliding_window(signals: Signals) -> bool:
    return signals.has(SLIDING_WINDOW)


__all__ = [
    "Rule",
    "Predicate",
    "first_match",
    "matching_rule",
    "is_binary_search",
    "is_selection_sort",
    "is_sorting",
    "is_graph_traversal",
    "is_dfs",
    "is_bfs",
    "is_dynamic_programming",
    "is_union_find",
    "is_heap",
    "is_recursive",
    "has_nested_loops",
    "is_quick_sort",
    "is_merge_sort",
    "is_two_pointers",
    "is_sliding_window",
]
