"""Prompt templates for the note generation stages."""

from dataclasses import dataclass

from .models import AlgorithmAnalysis


@dataclass(frozen=True)
class StagePrompt:
    """System + user prompt and sampling settings for one stage."""

    system: str
    user: str
    temperature: float
    max_tokens: int
    json_mode: bool = False


def _code_block(code: str, language: str) -> str:
    return f"CODE:\n```{language}\n{code}\n```"


class PromptTemplate:
    """Builds the prompt for every stage of the pipeline."""

    @staticmethod
    def analyze(code: str, language: str) -> StagePrompt:
        user = f"""You are a Computer Science Professor analyzing code.

{_code_block(code, language)}

Think step-by-step:
1. What algorithm/pattern do I see? (sorting, searching, DP, etc.)
2. What is the core problem being solved?
3. What are the main steps in pseudocode form?

Respond in JSON format:
{{
  "reasoning": "Step-by-step analysis of what you observe",
  "algorithmType": "e.g., Binary Search, Selection Sort, Dynamic Programming",
  "title": "Short name (2-4 words)",
  "problem": "One sentence problem statement (max 100 chars)",
  "pseudocode": "1. Step one\\n2. Step two\\n3. Step three"
}}"""
        return StagePrompt(
            system=(
                "You are a CS professor analyzing algorithms. Think step-by-step. "
                "Use \\n for line breaks in JSON strings."
            ),
            user=user,
            temperature=0.2,
            max_tokens=1500,
            json_mode=True,
        )

    @staticmethod
    def approach(code: str, language: str, analysis: AlgorithmAnalysis) -> StagePrompt:
        user = f"""You are a technical writer creating CONCISE algorithm explanations.

ALGORITHM TYPE: {analysis.algorithm_type}
PROBLEM: {analysis.problem}

{_code_block(code, language)}

Write a BRIEF explanation of the approach in 2-3 SHORT paragraphs:
- Paragraph 1: What the algorithm does and key insight
- Paragraph 2: How it works step-by-step
- Paragraph 3: Why it's effective

CRITICAL RULES:
- Be concise, no repetition
- Separate paragraphs with a blank line
- Focus on key ideas only

Return ONLY the approach text."""
        return StagePrompt(
            system="You are a technical writer. Be concise. Short paragraphs only.",
            user=user,
            temperature=0.3,
            max_tokens=800,
        )

    @staticmethod
    def complexity(code: str, language: str, analysis: AlgorithmAnalysis) -> StagePrompt:
        user = f"""You are an algorithm analyst computing time and space complexity.

ALGORITHM: {analysis.algorithm_type}

{_code_block(code, language)}

Respond in JSON:
{{
  "reasoning": "Brief analysis",
  "timeComplexity": "O(?)",
  "spaceComplexity": "O(?)"
}}"""
        return StagePrompt(
            system="You are an algorithm analyst. Be precise and brief.",
            user=user,
            temperature=0.1,
            max_tokens=1000,
            json_mode=True,
        )

    @staticmethod
    def explanation(code: str, language: str, analysis: AlgorithmAnalysis) -> StagePrompt:
        user = f"""You are a code reviewer providing a brief walkthrough.

ALGORITHM: {analysis.algorithm_type}

{_code_block(code, language)}

Provide 2-3 short paragraphs:
- Setup
- Main logic flow
- Key implementation details

Separate paragraphs with a blank line.
Return ONLY the explanation text."""
        return StagePrompt(
            system="You are a code reviewer. Be brief. Skip obvious details.",
            user=user,
            temperature=0.3,
            max_tokens=600,
        )

    @staticmethod
    def edge_cases(analysis: AlgorithmAnalysis) -> StagePrompt:
        user = f"""You are a QA tester identifying edge cases.

ALGORITHM: {analysis.algorithm_type}
PROBLEM: {analysis.problem}

List 4-6 edge cases in JSON:
{{
  "edgeCases": ["Case 1", "Case 2"]
}}"""
        return StagePrompt(
            system="You are a QA tester. Be specific and concise.",
            user=user,
            temperature=0.6,
            max_tokens=800,
            json_mode=True,
        )

    @staticmethod
    def examples(analysis: AlgorithmAnalysis) -> StagePrompt:
        user = f"""You are a technical writer creating concrete examples.

ALGORITHM: {analysis.algorithm_type}
PROBLEM: {analysis.problem}

Respond in JSON:
{{
  "examples": [
    {{
      "input": "Example input",
      "output": "Expected output",
      "note": "Brief note"
    }}
  ]
}}"""
        return StagePrompt(
            system="Create clear, concrete examples.",
            user=user,
            temperature=0.5,
            max_tokens=1000,
            json_mode=True,
        )

    @staticmethod
    def connection_check() -> StagePrompt:
        return StagePrompt(
            system="",
            user='Respond with JSON: {"status": "ok", "message": "Connected"}',
            temperature=0.0,
            max_tokens=100,
            json_mode=True,
        )


__all__ = ["StagePrompt", "PromptTemplate"]
