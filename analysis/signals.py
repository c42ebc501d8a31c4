"""Lexical signal extraction over raw source text.

Every probe is an independent regex over the scanned snippet. Nothing here
parses the language; false positives are expected and resolved (partially)
by the priority tables downstream.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence, Tuple

from shared.config import DEFAULT_MAX_CODE_CHARS


BINARY_SEARCH = "binary search"
SORTING = "sorting"
IN_PLACE_SWAP = "in-place swap"
DFS = "DFS"
BFS = "BFS"
DYNAMIC_PROGRAMMING = "dynamic programming"
UNION_FIND = "union-find"
HEAP = "priority_queue / heap"
RECURSIVE = "recursive"
NESTED_LOOPS = "nested loops"
QUICK_SORT = "quick sort"
MERGE_SORT = "merge sort"
TWO_POINTERS = "two pointers"
SLIDING_WINDOW = "sliding window"

COMMENT_SCAN_LINES = 40

# Fixed probe order; each fires at most once.
PROBES: List[Tuple[str, Pattern]] = [
    (BINARY_SEARCH, re.compile(r"\b(?:binary|binarysearch|mid|left|right|low|high)\b", re.I)),
    (
        SORTING,
        re.compile(
            r"\b(?:sort|sorted|sorting|qsort|stable_sort)\b|\b\w+_sort\b|[a-z]sort\s*\(|\.sort\s*\(",
            re.I,
        ),
    ),
    (
        IN_PLACE_SWAP,
        re.compile(
            r"\bswap\w*\b|\b(?:temp|tmp)(?:\d+|_\w+)?\b"
            r"|\b(\w+(?:\[[^\]\n]+\])?)\s*,\s*(\w+(?:\[[^\]\n]+\])?)\s*=\s*\2\s*,\s*\1",
            re.I,
        ),
    ),
    (DFS, re.compile(r"\bdfs\b|depth[\s_-]*first", re.I)),
    (BFS, re.compile(r"\bbfs\b|breadth[\s_-]*first", re.I)),
    (DYNAMIC_PROGRAMMING, re.compile(r"\bdp\b|memo|dynamic[\s_-]*programming", re.I)),
    (UNION_FIND, re.compile(r"union[\s_-]*find|disjoint[\s_-]*set|\bdsu\b", re.I)),
    (HEAP, re.compile(r"priority_?queue|\bheap\w*\b|\bheapq\b", re.I)),
]

# Refinements, appended after the recursion check. Sort subtypes only fire
# together with the sorting hint.
SORT_SUBTYPE_PROBES: List[Tuple[str, Pattern]] = [
    (QUICK_SORT, re.compile(r"partition|quick[\s_-]*sort", re.I)),
    (MERGE_SORT, re.compile(r"merge", re.I)),
]
TECHNIQUE_PROBES: List[Tuple[str, Pattern]] = [
    (TWO_POINTERS, re.compile(r"\btwo[\s_-]*pointers?|\bleft\b[^\n]*\bright\b", re.I)),
    (SLIDING_WINDOW, re.compile(r"window|substr|subarray", re.I)),
]

_RECURSION_WORD_RE = re.compile(r"\brecurs\w*", re.I)

_FUNC_DEF_RES = (
    re.compile(r"^[ \t]*(?:async[ \t]+)?def[ \t]+(\w+)[ \t]*\(", re.M),
    re.compile(r"\bfunction\s*\*?\s*(\w+)\s*\("),
    re.compile(r"\b(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s*)?(?:function\b|\([^)\n]*\)\s*=>)"),
    re.compile(r"\b(?:func|fn|fun)\s+(\w+)\s*[<(]"),
    re.compile(r"\b(\w+)\s*\([^;{}()]*\)\s*(?:const\s*)?(?:throws\s+[\w\s,.]+)?\{"),
)
_NOT_FUNCTIONS = frozenset(
    {"if", "for", "while", "switch", "catch", "return", "sizeof", "else", "do", "with", "elif"}
)

_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.S)
_LINE_COMMENT_RE = re.compile(r"//[^\n]*")
_HASH_COMMENT_RE = re.compile(r"(^|[ \t])#[^\n]*", re.M)
_PYTHON_BLOCK_RE = re.compile(
    r"^[ \t]*(?:async[ \t]+)?(?:def|for|while|if|elif|else|class)\b[^\n]*:[ \t]*$",
    re.M,
)
_INDENTED_FOR_RE = re.compile(r"^[ \t]*(?:async[ \t]+)?for\b[^\n]*:[ \t]*$")

_DIRECTIVE_RE = re.compile(r"^\s*(?:#\s*(?:include|pragma|define|ifndef|ifdef|endif|if|undef)\b|#!)", re.I)
_LINE_MARKER_RES = (
    ("//", re.compile(r"//")),
    ("#", re.compile(r"#")),
    ("--", re.compile(r"--+(?:\s|$)")),
    (";;", re.compile(r";;+(?:\s|$)")),
)
_BLOCK_DELIMITERS = (("/*", "*/"), ('"""', '"""'), ("'''", "'''"))
_MARKER_PREFIX_RE = re.compile(r"^\s*(?:/\*+!?|\*+/|\*+|//+!?|#+!?|--+(?=\s|$)|;;+(?=\s|$)|\"\"\"|''')\s?")
_MARKER_SUFFIX_RE = re.compile(r"\s*(?:\*+/|\"\"\"|''')\s*$")


@dataclass(frozen=True)
class Signals:
    """
    Output of the extractor.

    Attributes:
        hints: Detected hint tags in detection order
        top_comment: Cleaned leading comment ("" when absent or a directive)
        nested_loops: Whether nested for-loops were found
        snippet: The scanned prefix of the source
    """

    hints: Tuple[str, ...]
    top_comment: str
    nested_loops: bool
    snippet: str

    @property
    def hint_text(self) -> str:
        return " ".join(self.hints).lower()

    def has(self, hint: str) -> bool:
        return hint in self.hints


def extract_signals(code: str, max_chars: int = DEFAULT_MAX_CODE_CHARS) -> Signals:
    """
    Scan the first *max_chars* characters of *code* for algorithm hints.

    Args:
        code: Raw source text (any language)
        max_chars: Scan budget

    Returns:
        Signals with ordered hints and the cleaned leading comment
    """
    snippet = (code or "")[:max_chars]
    hints: List[str] = [tag for tag, pattern in PROBES if pattern.search(snippet)]

    if _RECURSION_WORD_RE.search(snippet) or has_self_call(snippet):
        hints.append(RECURSIVE)
    if SORTING in hints:
        hints.extend(tag for tag, pattern in SORT_SUBTYPE_PROBES if pattern.search(snippet))
    hints.extend(tag for tag, pattern in TECHNIQUE_PROBES if pattern.search(snippet))

    nested = has_nested_loops(snippet)
    if nested:
        hints.append(NESTED_LOOPS)

    return Signals(
        hints=tuple(hints),
        top_comment=extract_top_comment(snippet),
        nested_loops=nested,
        snippet=snippet,
    )


def function_names(snippet: str) -> List[str]:
    names: List[str] = []
    for pattern in _FUNC_DEF_RES:
        for match in pattern.finditer(snippet):
            name = match.group(1)
            if name.lower() in _NOT_FUNCTIONS or name in names:
                continue
            names.append(name)
    return names


def has_self_call(snippet: str) -> bool:
    """True when some defined function returns a call to itself.

    Only checks ``return ... name(`` on the same line; calls in other
    positions are missed on purpose.
    """
    for name in function_names(snippet):
        if re.search(r"\breturn\b[^;\n]*\b" + re.escape(name) + r"\s*\(", snippet):
            return True
    return False


def strip_comments(snippet: str) -> str:
    """Drop comments before loop detection.

    ``//`` is kept (Python floor division) when the text has colon-terminated
    block headers.
    """
    text = _BLOCK_COMMENT_RE.sub("", snippet)
    if not _PYTHON_BLOCK_RE.search(text):
        text = _LINE_COMMENT_RE.sub("", text)
    return _HASH_COMMENT_RE.sub(r"\1", text)


def has_nested_loops(snippet: str) -> bool:
    """Detect a for-loop textually inside another for-loop body."""
    text = strip_comments(snippet)
    return _nested_braced_for(text) or _nested_indented_for(text)


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _skip_parens(text: str, open_index: int) -> int:
    """Return the index just past the parenthesis matching ``text[open_index]``."""
    depth = 0
    for index in range(open_index, len(text)):
        if text[index] == "(":
            depth += 1
        elif text[index] == ")":
            depth -= 1
            if depth == 0:
                return index + 1
    return len(text)


def _nested_braced_for(text: str) -> bool:
    depth = 0
    loop_depths: List[int] = []
    pending_body = False
    index, total = 0, len(text)

    while index < total:
        ch = text[index]
        if ch == "{":
            depth += 1
            if pending_body:
                loop_depths.append(depth)
                pending_body = False
        elif ch == "}":
            if loop_depths and loop_depths[-1] == depth:
                loop_depths.pop()
            depth = max(depth - 1, 0)
        elif (
            ch == "f"
            and text.startswith("for", index)
            and (index == 0 or not _is_word_char(text[index - 1]))
            and index + 3 < total
            and not _is_word_char(text[index + 3])
        ):
            rest = index + 3
            while rest < total and text[rest] in " \t":
                rest += 1
            if rest < total and text[rest] == "(":
                if loop_depths:
                    return True
                after = _skip_parens(text, rest)
                body = after
                while body < total and text[body].isspace():
                    body += 1
                if body < total and text[body] == "{":
                    pending_body = True
                    index = body
                    continue
                if text.startswith("for", body) and body + 3 < total and not _is_word_char(text[body + 3]):
                    return True
                index = after
                continue
            line_end = text.find("\n", rest)
            line_end = total if line_end < 0 else line_end
            brace = text.find("{", rest, line_end)
            if brace >= 0:
                if loop_depths:
                    return True
                pending_body = True
                index = brace
                continue
        index += 1
    return False


def _nested_indented_for(text: str) -> bool:
    open_loops: List[int] = []
    for raw_line in text.splitlines():
        line = raw_line.expandtabs(4)
        if not line.strip():
            continue
        indent = len(line) - len(line.lstrip())
        while open_loops and indent <= open_loops[-1]:
            open_loops.pop()
        if _INDENTED_FOR_RE.match(line):
            if open_loops:
                return True
            open_loops.append(indent)
    return False


def extract_top_comment(snippet: str, max_lines: int = COMMENT_SCAN_LINES) -> str:
    """
    Return the first comment block within the first *max_lines* lines.

    A block whose first line is a preprocessor-style directive (``#include``,
    ``#pragma``, ``#define``, shebang) yields an empty string.
    """
    lines = (snippet or "").splitlines()[:max_lines]
    block = _first_comment_block(lines)
    if not block or _DIRECTIVE_RE.match(block[0]):
        return ""

    cleaned: List[str] = []
    for line in block:
        line = _MARKER_PREFIX_RE.sub("", line)
        line = _MARKER_SUFFIX_RE.sub("", line)
        cleaned.append(line.strip())
    return "\n".join(cleaned).strip()


def _first_comment_block(lines: Sequence[str]) -> Optional[List[str]]:
    for start, line in enumerate(lines):
        stripped = line.strip()
        for opener, closer in _BLOCK_DELIMITERS:
            if stripped.startswith(opener):
                return _collect_block(lines, start, opener, closer)
        marker = _line_marker(stripped)
        if marker:
            block = []
            for candidate in lines[start:]:
                if _line_marker(candidate.strip()) != marker:
                    break
                block.append(candidate)
            return block
    return None


def _collect_block(lines: Sequence[str], start: int, opener: str, closer: str) -> List[str]:
    first = lines[start].strip()
    if closer in first[len(opener):]:
        return [first]
    block = [lines[start]]
    for line in lines[start + 1 :]:
        block.append(line)
        if closer in line:
            break
    return block


def _line_marker(stripped: str) -> Optional[str]:
    for marker, pattern in _LINE_MARKER_RES:
        if pattern.match(stripped):
            return marker
    return None


__all__ = [
    "BINARY_SEARCH",
    "SORTING",
    "IN_PLACE_SWAP",
    "DFS",
    "BFS",
    "DYNAMIC_PROGRAMMING",
    "UNION_FIND",
    "HEAP",
    "RECURSIVE",
    "NESTED_LOOPS",
    "QUICK_SORT",
    "MERGE_SORT",
    "TWO_POINTERS",
    "SLIDING_WINDOW",
    "PROBES",
    "SORT_SUBTYPE_PROBES",
    "TECHNIQUE_PROBES",
    "Signals",
    "extract_signals",
    "extract_top_comment",
    "has_nested_loops",
    "has_self_call",
    "strip_comments",
    "function_names",
]
