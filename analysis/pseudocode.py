"""Canned pseudocode per algorithm family."""

from typing import List

from .rules import (
    Rule,
    first_match,
    is_bfs,
    is_binary_search,
    is_dfs,
    is_dynamic_programming,
    is_heap,
    is_recursive,
    is_selection_sort,
    is_sliding_window,
    is_sorting,
    is_two_pointers,
    is_union_find,
)
from .signals import Signals


BINARY_SEARCH_PSEUDOCODE = """1. Set low = 0, high = n - 1
2. While low <= high:
     mid = low + (high - low) / 2
     If arr[mid] == target: return mid
     If arr[mid] < target: low = mid + 1
     Else: high = mid - 1
3. Return -1 (target not found)"""

SELECTION_SORT_PSEUDOCODE = """1. For i from 0 to n - 2:
     minIndex = i
     For j from i + 1 to n - 1:
       If arr[j] < arr[minIndex]: minIndex = j
     Swap arr[i] and arr[minIndex]
2. Output the sorted array"""

SORTING_PSEUDOCODE = "1. Sort the input with an efficient O(n log n) sort and use the ordered result"

DFS_PSEUDOCODE = """1. Mark all vertices unvisited
2. For each unvisited vertex v: DFS(v)
3. DFS(v):
     Mark v visited
     For each neighbor u of v:
       If u is unvisited: DFS(u)"""

BFS_PSEUDOCODE = """1. Push the start vertex into a queue and mark it visited
2. While the queue is not empty:
     v = pop front of queue
     For each neighbor u of v:
       If u is unvisited: mark u visited, push u
3. Return the visit order / distances"""

DP_PSEUDOCODE = """1. Define the state dp[i] (or dp[i][j]) and its meaning
2. Initialize the base cases
3. For each state in dependency order:
     dp[state] = best combination of smaller states
4. Return the answer state"""

UNION_FIND_PSEUDOCODE = """1. parent[x] = x for every element
2. find(x): while parent[x] != x: x = parent[x] (with path compression)
3. union(a, b): attach root of a to root of b (by rank or size)
4. Answer connectivity queries with find(a) == find(b)"""

HEAP_PSEUDOCODE = """1. Build a min/max heap (priority queue) from the input
2. While the heap is not empty:
     x = pop top element
     Process x and push any new candidates
3. Return the collected result"""

RECURSIVE_PSEUDOCODE = """1. If the input is a base case: return its answer directly
2. Split the problem into smaller subproblems
3. Solve each subproblem recursively
4. Combine the sub-results into the answer"""

SLIDING_WINDOW_PSEUDOCODE = """1. Set left = 0 and an empty window summary
2. For right from 0 to n - 1:
     Add arr[right] to the window
     While the window is invalid: remove arr[left], left += 1
     Update the best answer with the current window
3. Return the best answer"""

TWO_POINTERS_PSEUDOCODE = """1. Set i = 0, j = n - 1
2. While i < j:
     If the pair (i, j) satisfies the condition: record it
     Move i forward or j backward depending on the comparison
3. Return the recorded result"""

FALLBACK_PSEUDOCODE = """1. Parse the input
2. Apply the inferred idea to the data
3. Output the result"""

PSEUDOCODE_RULES: List[Rule] = [
    Rule("binary_search", is_binary_search, BINARY_SEARCH_PSEUDOCODE),
    Rule("selection_sort", is_selection_sort, SELECTION_SORT_PSEUDOCODE),
    Rule("sorting", is_sorting, SORTING_PSEUDOCODE),
    Rule("dfs", is_dfs, DFS_PSEUDOCODE),
    Rule("bfs", is_bfs, BFS_PSEUDOCODE),
    Rule("dynamic_programming", is_dynamic_programming, DP_PSEUDOCODE),
    Rule("union_find", is_union_find, UNION_FIND_PSEUDOCODE),
    Rule("heap", is_heap, HEAP_PSEUDOCODE),
    Rule("recursive", is_recursive, RECURSIVE_PSEUDOCODE),
    Rule("sliding_window", is_sliding_window, SLIDING_WINDOW_PSEUDOCODE),
    Rule("two_pointers", is_two_pointers, TWO_POINTERS_PSEUDOCODE),
]


def synthesize_pseudocode(signals: Signals) -> str:
    return first_match(PSEUDOCODE_RULES, signals, FALLBACK_PSEUDOCODE)


__all__ = [
    "PSEUDOCODE_RULES",
    "BINARY_SEARCH_PSEUDOCODE",
    "SELECTION_SORT_PSEUDOCODE",
    "SORTING_PSEUDOCODE",
    "SLIDING_WINDOW_PSEUDOCODE",
    "TWO_POINTERS_PSEUDOCODE",
    "FALLBACK_PSEUDOCODE",
    "synthesize_pseudocode",
]
