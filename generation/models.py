"""Data models for generation layer.

Contains data classes passed between the sequential LLM stages.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LLMResponse:
    """Response from LLM generation.

    Attributes:
        content: Generated text content
        model: Model name used for generation
        usage: Optional token usage information
    """

    content: str
    model: str
    usage: Optional[dict] = None


@dataclass
class AlgorithmAnalysis:
    """Output of the first stage, reused as context by later stages.

    Attributes:
        algorithm_type: e.g. "Binary Search", "Selection Sort"
        title: Short name (2-4 words)
        problem: One sentence problem statement
        pseudocode: Numbered steps
        reasoning: The model's step-by-step observations
    """

    algorithm_type: str
    title: str = ""
    problem: str = ""
    pseudocode: str = ""
    reasoning: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "AlgorithmAnalysis":
        return cls(
            algorithm_type=str(data.get("algorithmType") or data.get("title") or "Unknown algorithm"),
            title=str(data.get("title") or ""),
            problem=str(data.get("problem") or ""),
            pseudocode=str(data.get("pseudocode") or ""),
            reasoning=str(data.get("reasoning") or ""),
        )


__all__ = ["LLMResponse", "AlgorithmAnalysis"]
