"""Tests for lexical signal extraction."""

from analysis.signals import (
    BINARY_SEARCH,
    DFS,
    HEAP,
    IN_PLACE_SWAP,
    MERGE_SORT,
    NESTED_LOOPS,
    QUICK_SORT,
    RECURSIVE,
    SLIDING_WINDOW,
    SORTING,
    TWO_POINTERS,
    extract_signals,
    extract_top_comment,
    has_nested_loops,
    has_self_call,
    strip_comments,
)


SELECTION_SORT_CPP = """#include <iostream>
#include <vector>
using namespace std;

void selectionSort(vector<int>& arr, int n) {
    for (int i = 0; i < n - 1; i++) {
        int minIndex = i;
        for (int j = i + 1; j < n; j++) {
            if (arr[j] < arr[minIndex]) {
                minIndex = j;
            }
        }
        int temp = arr[i];
        arr[i] = arr[minIndex];
        arr[minIndex] = temp;
    }
}
"""

BUBBLE_PY = """def bubble(items):
    for i in range(len(items)):
        for j in range(len(items) - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items
"""


def test_selection_sort_hints_in_detection_order():
    signals = extract_signals(SELECTION_SORT_CPP)
    assert signals.hints == (SORTING, IN_PLACE_SWAP, NESTED_LOOPS)
    assert signals.nested_loops is True


def test_nested_loops_is_always_last():
    code = "// binary search\n" + SELECTION_SORT_CPP
    signals = extract_signals(code)
    assert signals.hints[0] == BINARY_SEARCH
    assert signals.hints[-1] == NESTED_LOOPS


def test_braced_nested_loops():
    assert has_nested_loops(SELECTION_SORT_CPP)


def test_sequential_braced_loops_are_not_nested():
    code = (
        "for (int i = 0; i < n; i++) { a[i] = 0; }\n"
        "for (int j = 0; j < n; j++) { b[j] = 1; }\n"
    )
    assert not has_nested_loops(code)


def test_unbraced_nested_loops():
    code = "for (int i = 0; i < n; i++)\n    for (int j = 0; j < n; j++)\n        c++;\n"
    assert has_nested_loops(code)


def test_indented_nested_loops():
    assert has_nested_loops(BUBBLE_PY)


def test_sequential_indented_loops_are_not_nested():
    code = "for i in range(n):\n    total += i\nfor j in range(n):\n    total -= j\n"
    assert not has_nested_loops(code)


def test_commented_loops_are_ignored():
    code = "for (int i = 0; i < n; i++) {\n    // for (int j = 0; j < n; j++) {}\n    x++;\n}\n"
    assert not has_nested_loops(code)


def test_paren_less_braced_loops():
    code = "for i := 0; i < n; i++ {\n\tfor j := 0; j < n; j++ {\n\t\tsum++\n\t}\n}\n"
    assert has_nested_loops(code)


def test_python_tuple_swap_detected():
    assert IN_PLACE_SWAP in extract_signals(BUBBLE_PY).hints


def test_template_keyword_is_not_a_swap():
    assert IN_PLACE_SWAP not in extract_signals("template <typename T> T add(T a, T b);").hints


def test_self_call_and_recursion_hint():
    code = "def fact(n):\n    if n <= 1:\n        return 1\n    return n * fact(n - 1)\n"
    assert has_self_call(code)
    assert RECURSIVE in extract_signals(code).hints


def test_recursion_keyword_hint():
    assert RECURSIVE in extract_signals("// recursive helper\nint f(int x);").hints


def test_dfs_and_heap_hints():
    assert DFS in extract_signals("void dfs(int u) {}").hints
    assert HEAP in extract_signals("import heapq\nheapq.heappush(h, 3)").hints


def test_each_hint_fires_once():
    signals = extract_signals("sort sort sorted left right mid low high")
    assert len(signals.hints) == len(set(signals.hints))


def test_scan_budget_limits_detection():
    code = "x = 1\n" * 10 + "heapq.heappush(h, 1)"
    assert HEAP not in extract_signals(code, max_chars=20).hints


def test_top_comment_line_comments():
    code = "// Two Sum using a hash map\n// O(n) time\nint main() {}\n"
    assert extract_top_comment(code) == "Two Sum using a hash map\nO(n) time"


def test_top_comment_block_comment():
    code = "/**\n * Longest Increasing Subsequence\n * classic DP\n */\nint lis();\n"
    assert extract_top_comment(code) == "Longest Increasing Subsequence\nclassic DP"


def test_top_comment_docstring():
    assert extract_top_comment('"""Merge intervals."""\n\ndef merge(): pass\n') == "Merge intervals."


def test_top_comment_directive_is_discarded():
    assert extract_top_comment(SELECTION_SORT_CPP) == ""
    assert extract_top_comment("#!/usr/bin/env python3\n# Two Sum\n") == ""


def test_top_comment_only_in_first_40_lines():
    code = "x = 1\n" * 45 + "# Late comment here\n"
    assert extract_top_comment(code) == ""


def test_empty_input_has_no_signals():
    signals = extract_signals("")
    assert signals.hints == ()
    assert signals.top_comment == ""
    assert signals.nested_loops is False


def test_floor_division_keeps_python_loop_header():
    code = "def half_pairs(n):\n    for i in range(n // 2):\n        for j in range(n):\n            print(i, j)\n"
    assert extract_signals(code).nested_loops is True


def test_slash_comments_still_stripped_outside_python():
    assert strip_comments("int x = 1; // for (;;) {}\n") == "int x = 1; \n"


def test_decrement_line_is_not_a_comment():
    code = "void drain(int remaining_items_count) {\n--remaining_items_count;\n}\n"
    assert extract_top_comment(code) == ""
    assert extract_top_comment("--count;\n// Counting helper\nint main() {}\n") == "Counting helper"


def test_dash_and_semicolon_comments():
    assert extract_top_comment("-- Two Sum in SQL\nSELECT 1;\n") == "Two Sum in SQL"
    assert extract_top_comment(";; Fibonacci in Lisp\n(defun fib (n) n)\n") == "Fibonacci in Lisp"


def test_sort_subtype_hints_follow_recursion_check():
    code = "void quickSort(int a[], int lo, int hi) {\n    int p = partition(a, lo, hi);\n}\n"
    assert extract_signals(code).hints == (SORTING, QUICK_SORT)
    assert MERGE_SORT in extract_signals("void mergeSort(int a[], int n) {\n    merge(a, n / 2, n);\n}\n").hints


def test_merge_without_sorting_is_not_a_subtype():
    assert extract_signals("def merge(a, b):\n    return a + b\n").hints == ()


def test_technique_hints():
    assert SLIDING_WINDOW in extract_signals("int maxSubarraySum(int k);").hints
    assert TWO_POINTERS in extract_signals("def two_pointer_pair(nums):\n    pass\n").hints
    signals = extract_signals("int left = 0, right = n - 1;\nfor (a;b;c) { for (d;e;f) {} }")
    assert signals.hints[0] == BINARY_SEARCH
    assert TWO_POINTERS in signals.hints
    assert signals.hints[-1] == NESTED_LOOPS
