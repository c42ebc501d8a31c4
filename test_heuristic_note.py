"""Tests for the heuristic note: rule priorities, edge cases and assembly."""

import pytest

from analysis import (
    FALLBACK_PSEUDOCODE,
    NOT_INFERRED_PROBLEM,
    NOT_INFERRED_TITLE,
    SEED_EDGE_CASES,
    UNKNOWN_COMPLEXITY,
    build_heuristic_note,
    collect_edge_cases,
    extract_signals,
    infer_title,
)
from analysis.complexity import estimate_complexity
from analysis.edge_cases import OFF_BY_ONE_CASE, SORTED_INPUT_CASE
from analysis.explanation import APPROACHES, PROBLEM_STATEMENTS
from analysis.pseudocode import (
    SELECTION_SORT_PSEUDOCODE,
    SLIDING_WINDOW_PSEUDOCODE,
    TWO_POINTERS_PSEUDOCODE,
    synthesize_pseudocode,
)
from domain import Example, Note
from ingestion.loader import source_from_text
from shared.text_utils import TRUNCATION_MARKER

from test_signals import SELECTION_SORT_CPP


BINARY_SEARCH_CPP = """int binarySearch(const vector<int>& arr, int target) {
    int left = 0, right = arr.size() - 1;
    while (left <= right) {
        int mid = (left + right) / 2;
        if (arr[mid] == target) return mid;
        if (arr[mid] < target) left = mid + 1;
        else right = mid - 1;
    }
    return -1;
}
"""

SORTING_CASES = (
    "already sorted input",
    "reverse sorted input",
    "all elements equal",
    "large n (quadratic comparisons)",
)

STRING_FIELDS = ("title", "language", "problem", "approach", "pseudocode", "complexity", "explanation", "code")


def _note(code: str, path: str = "solution.cpp") -> Note:
    return build_heuristic_note(source_from_text(code, path))


@pytest.mark.parametrize(
    "code",
    ["", "   \n\t  ", SELECTION_SORT_CPP, BINARY_SEARCH_CPP, "\x00\x01 garbage {{{ for ("],
)
def test_every_field_has_documented_type(code):
    data = _note(code).to_dict()
    for name in STRING_FIELDS:
        assert isinstance(data[name], str), name
    assert data["title"]
    assert data["problem"]
    assert isinstance(data["edgeCases"], list)
    assert isinstance(data["examples"], list)
    for example in data["examples"]:
        assert example["input"] or example["output"]


def test_same_input_gives_identical_notes():
    assert _note(SELECTION_SORT_CPP).to_dict() == _note(SELECTION_SORT_CPP).to_dict()


def test_binary_search_outranks_selection_sort():
    code = BINARY_SEARCH_CPP + SELECTION_SORT_CPP
    note = _note(code)
    assert note.title == "Binary Search (likely)"
    assert note.complexity == "Time: O(log n), Space: O(1)"


def test_edge_cases_are_unique_and_seeded():
    for code in ("", SELECTION_SORT_CPP, BINARY_SEARCH_CPP + SELECTION_SORT_CPP):
        cases = _note(code).edge_cases
        assert len(cases) == len(set(cases))
        for seed in SEED_EDGE_CASES:
            assert seed in cases


def test_oversized_code_is_truncated():
    budget = 20000
    note = _note("a" * (budget + 500))
    assert note.code.endswith(TRUNCATION_MARKER)
    assert len(note.code) == budget + len(TRUNCATION_MARKER)


def test_code_within_budget_is_kept():
    assert _note(SELECTION_SORT_CPP).code == SELECTION_SORT_CPP


def test_selection_sort_scenario():
    note = _note(SELECTION_SORT_CPP, "selection_sort.cpp")
    assert note.title == "Selection Sort (likely)"
    assert "O(n^2)" in note.complexity
    assert note.pseudocode == SELECTION_SORT_PSEUDOCODE
    for case in SEED_EDGE_CASES + SORTING_CASES:
        assert case in note.edge_cases
    assert note.language == "cpp"
    assert note.examples[0].output == "[11, 12, 22, 25, 64]"
    assert "selection sort" in note.explanation


def test_binary_search_scenario():
    note = _note(BINARY_SEARCH_CPP)
    assert note.title == "Binary Search (likely)"
    assert note.complexity == "Time: O(log n), Space: O(1)"
    assert SORTED_INPUT_CASE in note.edge_cases
    assert OFF_BY_ONE_CASE in note.edge_cases
    assert note.examples == [
        Example(
            input="arr = [1, 3, 5, 7, 9, 11], target = 7",
            output="3",
            note="Index of the target in the sorted array; -1 when absent",
        )
    ]


def test_empty_input_scenario():
    note = _note("", "")
    assert note.title == NOT_INFERRED_TITLE
    assert note.problem == NOT_INFERRED_PROBLEM
    assert note.pseudocode == FALLBACK_PSEUDOCODE
    assert note.complexity == UNKNOWN_COMPLEXITY
    assert note.edge_cases == list(SEED_EDGE_CASES)
    assert note.examples == []
    assert note.explanation == ""
    assert note.approach == ""
    assert note.language == "unknown"


def test_comment_title_wins():
    note = _note("// Two Sum using a hash map\n" + BINARY_SEARCH_CPP)
    assert note.title == "Two Sum using a hash map"
    assert note.problem == "Two Sum using a hash map"
    # rules still drive the other fields
    assert note.complexity == "Time: O(log n), Space: O(1)"


@pytest.mark.parametrize(
    "comment",
    ["// Author: Jane Doe\n", "// hi\n", "// " + "x" * 200 + "\n"],
)
def test_unusable_comment_falls_through_to_rules(comment):
    assert infer_title(extract_signals(comment + SELECTION_SORT_CPP)) == "Selection Sort (likely)"


def test_title_table_order():
    cases = [
        ("std::sort(v.begin(), v.end());", "Sorting Problem (likely)"),
        ("void bfs(int s) {}", "Graph Traversal (DFS/BFS)"),
        ("int dp[100];", "Dynamic Programming Problem (likely)"),
        ("struct DSU { int p[10]; };", "Disjoint Set Union / Union-Find (likely)"),
        ("priority_queue<int> pq;", "Heap / Priority Queue Problem (likely)"),
        ("int f(int n) { return f(n - 1); }", "Divide and Conquer / Recursion (likely)"),
        ("for (a;b;c) { for (d;e;f) {} }", "Quadratic Nested-Loop Pattern (likely)"),
        ("tmp = a\na = b\nb = tmp\n", "In-place swap problem (inferred)"),
    ]
    for code, title in cases:
        assert infer_title(extract_signals(code)) == title, code


def test_nested_loops_outrank_dp_for_complexity():
    signals = extract_signals("int dp[10][10];\nfor (a;b;c) { for (d;e;f) { dp[a][d] = 1; } }")
    assert "O(n^2)" in estimate_complexity(signals)


def test_pseudocode_never_empty():
    for code in ("", "hello", "void bfs() {}", "int dp[3];"):
        assert synthesize_pseudocode(extract_signals(code))


def test_structural_edge_case_triggers():
    code = (
        "if (ptr == nullptr) return;\n"
        "if (a[i] < 0) neg++;\n"
        "unordered_map<int, int> seen;\n"
        "long best = INT_MAX;\n"
        "if (n == 0) return 0;\n"
    )
    cases = collect_edge_cases(extract_signals(code))
    for expected in (
        "zero-length input (n == 0)",
        "negative numbers",
        "null / None input",
        "missing key in map lookup",
        "integer overflow on large values",
    ):
        assert expected in cases


def test_title_extension_is_stripped_for_comment_titles():
    note = _note("// two_sum.cpp\nint main() {}\n", "two_sum.cpp")
    assert note.title == "two_sum"


WINDOW_SUM_CPP = """int maxSubarraySum(const vector<int>& a, int k) {
    int sum = 0, best = 0;
    for (int i = 0; i < (int)a.size(); i++) {
        sum += a[i];
        if (i >= k) sum -= a[i - k];
        if (i >= k - 1) best = max(best, sum);
    }
    return best;
}
"""

PAIR_SUM_PY = """def two_pointer_pair(nums, target):
    i, j = 0, len(nums) - 1
    while i < j:
        total = nums[i] + nums[j]
        if total == target:
            return i, j
        if total < target:
            i += 1
        else:
            j -= 1
    return None
"""


def test_sliding_window_scenario():
    note = _note(WINDOW_SUM_CPP)
    assert note.title == "Sliding Window (likely)"
    assert note.complexity == "Time: O(n), Space: O(1) or O(k) for the window"
    assert note.pseudocode == SLIDING_WINDOW_PSEUDOCODE
    assert note.approach == APPROACHES["sliding_window"]
    assert "window larger than array" in note.edge_cases
    assert "no valid window" in note.edge_cases


def test_two_pointers_scenario():
    note = _note(PAIR_SUM_PY, "pair_sum.py")
    assert note.title == "Two Pointers (likely)"
    assert note.complexity == "Time: O(n), Space: O(1)"
    assert note.pseudocode == TWO_POINTERS_PSEUDOCODE
    assert "all elements equal" in note.edge_cases


def test_technique_rules_do_not_displace_binary_search():
    note = _note(BINARY_SEARCH_CPP)
    assert "two pointers" in extract_signals(BINARY_SEARCH_CPP).hints
    assert note.title == "Binary Search (likely)"
    assert note.complexity == "Time: O(log n), Space: O(1)"


def test_sort_subtypes_refine_complexity_and_approach():
    quick = _note("void quickSort(int a[], int lo, int hi) {\n    int p = partition(a, lo, hi);\n}\n")
    assert quick.title == "Sorting Problem (likely)"
    assert quick.complexity == "Time: O(n log n) average, O(n^2) worst case, Space: O(log n)"
    assert quick.approach == APPROACHES["quick_sort"]

    merge = _note("void mergeSort(int a[], int n) {\n    merge(a, n / 2, n);\n}\n")
    assert merge.complexity == "Time: O(n log n), Space: O(n)"
    assert merge.problem == PROBLEM_STATEMENTS["merge_sort"]


def test_recursion_outranks_sort_subtype_complexity():
    code = "void quickSort(int a[], int lo, int hi) {\n    int p = partition(a, lo, hi);\n    return quickSort(a, lo, p - 1);\n}\n"
    assert "recursion" in _note(code).complexity


def test_decrement_line_does_not_become_title():
    note = _note("--remaining_items_count;\nint x = 0;\n")
    assert note.title == NOT_INFERRED_TITLE
    assert note.problem == NOT_INFERRED_PROBLEM


def test_author_comment_is_not_the_problem():
    note = _note("// Author: Jane Doe\n" + SELECTION_SORT_CPP)
    assert note.title == "Selection Sort (likely)"
    assert note.problem == PROBLEM_STATEMENTS["selection_sort"]
