"""Domain entities shared by every layer.

A ``SourceUnit`` is what gets analyzed, a ``Note`` is what gets produced.
Both the heuristic core and the LLM pipeline return the same ``Note`` shape,
so savers and publishers never need to know which mode produced it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


UNKNOWN_LANGUAGE = "unknown"


@dataclass(frozen=True)
class SourceUnit:
    """
    Raw text of one source file plus its inferred language tag.

    Attributes:
        content: Full file text (untruncated)
        language: Lower-cased file extension or "unknown"
        path: Path the content was read from ("" for in-memory sources)
    """

    content: str
    language: str = UNKNOWN_LANGUAGE
    path: str = ""


@dataclass
class Example:
    """One illustrative input/output pair."""

    input: str = ""
    output: str = ""
    note: str = ""

    def is_empty(self) -> bool:
        return not (self.input or self.output)

    def to_dict(self) -> Dict[str, str]:
        return {"input": self.input, "output": self.output, "note": self.note}

    @classmethod
    def from_dict(cls, data: Any) -> "Example":
        if not isinstance(data, dict):
            return cls()
        return cls(
            input=_as_text(data.get("input")),
            output=_as_text(data.get("output")),
            note=_as_text(data.get("note")),
        )


@dataclass
class Note:
    """
    Structured description of an analyzed source file.

    Attributes:
        title: Human-readable title, never carries a file extension
        language: Short lowercase language token
        problem: Problem statement or the "not inferred" sentinel
        approach: Prose description of the approach
        pseudocode: Pseudocode block
        complexity: "Time: ..., Space: ..." string
        edge_cases: Ordered, duplicate-free edge case descriptions
        examples: Worked examples (input or output always non-empty)
        explanation: Plain-language walkthrough
        code: Original code, possibly truncated with a marker
    """

    title: str
    language: str
    problem: str
    approach: str = ""
    pseudocode: str = ""
    complexity: str = ""
    edge_cases: List[str] = field(default_factory=list)
    examples: List[Example] = field(default_factory=list)
    explanation: str = ""
    code: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the JSON key names of the note schema."""
        return {
            "title": self.title,
            "language": self.language,
            "problem": self.problem,
            "approach": self.approach,
            "pseudocode": self.pseudocode,
            "complexity": self.complexity,
            "edgeCases": list(self.edge_cases),
            "examples": [example.to_dict() for example in self.examples],
            "explanation": self.explanation,
            "code": self.code,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Note":
        """Build a Note from a loosely typed mapping (e.g. LLM output).

        Missing or mistyped fields become empty strings / lists; a bare string
        in ``edgeCases`` is wrapped into a one-element list.
        """
        edge_cases = data.get("edgeCases", data.get("edge_cases"))
        if isinstance(edge_cases, str):
            edge_cases = [edge_cases]
        if not isinstance(edge_cases, list):
            edge_cases = []

        examples = data.get("examples")
        if not isinstance(examples, list):
            examples = []

        return cls(
            title=_as_text(data.get("title")),
            language=_as_text(data.get("language")),
            problem=_as_text(data.get("problem")),
            approach=_as_text(data.get("approach")),
            pseudocode=_as_text(data.get("pseudocode")),
            complexity=_as_text(data.get("complexity")),
            edge_cases=[_as_text(case) for case in edge_cases],
            examples=[Example.from_dict(example) for example in examples],
            explanation=_as_text(data.get("explanation")),
            code=_as_text(data.get("code")),
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


__all__ = ["UNKNOWN_LANGUAGE", "SourceUnit", "Example", "Note"]
