"""Multi-stage LLM note generation.

Stages run strictly in sequence; every later stage receives the structured
result of the analysis stage as prompt context.

Pipeline (full LLM mode):
1. analyze      - algorithm type, title, problem, pseudocode (JSON)
2. approach     - short prose
3. complexity   - time/space (JSON)
4. explanation  - short prose
5. edge_cases   - list (JSON)
6. examples     - list of input/output/note (JSON)

Hybrid mode reruns only approach, explanation and edge_cases on top of a
heuristic note.
"""

from typing import List

from domain import Example, Note, SourceUnit
from shared.config import DEFAULT_MAX_CODE_CHARS
from shared.exceptions import GenerationError
from shared.text_utils import dedupe, normalize_text

from .client import LLMClientProtocol
from .models import AlgorithmAnalysis
from .parsing import parse_json_response, strip_code_fences
from .prompts import PromptTemplate, StagePrompt


HYBRID_EDGE_CASE_LIMIT = 6
# Slots of the capped list kept for generated cases that are not already present.
HYBRID_GENERATED_SLOTS = 2


class NoteGenerationPipeline:
    """Sequential LLM pipeline producing Note objects.

    Example:
        >>> pipeline = NoteGenerationPipeline(GeminiLLMClient())
        >>> note = pipeline.summarize(load_source("selection_sort.cpp"))
        >>> print(note.complexity)
    """

    def __init__(
        self,
        llm_client: LLMClientProtocol,
        *,
        max_code_chars: int = DEFAULT_MAX_CODE_CHARS,
    ):
        """Initialize the pipeline.

        Args:
            llm_client: Client used for every stage
            max_code_chars: Code beyond this budget is not sent to the model
        """
        self.llm_client = llm_client
        self.max_code_chars = max_code_chars

    # ------------------------------------------------------------------
    # Stage plumbing
    # ------------------------------------------------------------------

    def _run_stage(self, stage: str, prompt: StagePrompt) -> str:
        try:
            response = self.llm_client.generate(
                prompt=prompt.user,
                system_prompt=prompt.system or None,
                temperature=prompt.temperature,
                max_tokens=prompt.max_tokens,
                json_mode=prompt.json_mode,
            )
        except Exception as e:
            raise GenerationError(stage, str(e)) from e

        content = (response.content or "").strip()
        if not content:
            raise GenerationError(stage, "empty response")
        return content

    def _run_json_stage(self, stage: str, prompt: StagePrompt) -> dict:
        content = self._run_stage(stage, prompt)
        parsed = parse_json_response(content)
        if parsed is None:
            raise GenerationError(stage, "response is not a JSON object")
        return parsed

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def analyze(self, code: str, language: str) -> AlgorithmAnalysis:
        data = self._run_json_stage("analyze", PromptTemplate.analyze(code, language))
        return AlgorithmAnalysis.from_dict(data)

    def approach(self, code: str, language: str, analysis: AlgorithmAnalysis) -> str:
        content = self._run_stage("approach", PromptTemplate.approach(code, language, analysis))
        return strip_code_fences(content)

    def complexity(self, code: str, language: str, analysis: AlgorithmAnalysis) -> str:
        data = self._run_json_stage("complexity", PromptTemplate.complexity(code, language, analysis))
        time = data.get("timeComplexity") or "unknown"
        space = data.get("spaceComplexity") or "unknown"
        return f"Time: {time}, Space: {space}"

    def explanation(self, code: str, language: str, analysis: AlgorithmAnalysis) -> str:
        content = self._run_stage("explanation", PromptTemplate.explanation(code, language, analysis))
        return strip_code_fences(content)

    def edge_cases(self, analysis: AlgorithmAnalysis) -> List[str]:
        data = self._run_json_stage("edge_cases", PromptTemplate.edge_cases(analysis))
        cases = data.get("edgeCases") or []
        if isinstance(cases, str):
            cases = [cases]
        if not isinstance(cases, list):
            return []
        return [str(case) for case in cases if case]

    def examples(self, analysis: AlgorithmAnalysis) -> List[Example]:
        data = self._run_json_stage("examples", PromptTemplate.examples(analysis))
        items = data.get("examples") or []
        if not isinstance(items, list):
            return []
        return [Example.from_dict(item) for item in items]

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def summarize(self, source: SourceUnit) -> Note:
        """
        Run all six stages and assemble a note.

        Args:
            source: Source to describe

        Returns:
            Cleaned Note (whitespace collapsed, empty entries dropped)

        Raises:
            GenerationError: If any stage fails
        """
        code = source.content[: self.max_code_chars]
        language = source.language

        print("[generate] Stage 1: Analyzing algorithm")
        analysis = self.analyze(code, language)

        print("[generate] Stage 2: Generating approach")
        approach = self.approach(code, language, analysis)

        print("[generate] Stage 3: Computing complexity")
        complexity = self.complexity(code, language, analysis)

        print("[generate] Stage 4: Generating explanation")
        explanation = self.explanation(code, language, analysis)

        print("[generate] Stage 5: Finding edge cases")
        edge_cases = self.edge_cases(analysis)

        print("[generate] Stage 6: Generating examples")
        examples = self.examples(analysis)

        note = Note(
            title=analysis.title,
            language=language,
            problem=analysis.problem,
            approach=approach,
            pseudocode=analysis.pseudocode,
            complexity=complexity,
            edge_cases=edge_cases,
            examples=examples,
            explanation=explanation,
            code=source.content,
        )
        return cleanup_note(note)

    def enhance(self, note: Note, source: SourceUnit) -> Note:
        """
        Replace the prose fields of a heuristic note with generated text.

        Title, problem, pseudocode, complexity and examples are kept. Edge
        cases are the heuristic ones followed by the new generated ones,
        capped; up to HYBRID_GENERATED_SLOTS generated cases always survive
        the cap.

        Raises:
            GenerationError: If any stage fails
        """
        code = source.content[: self.max_code_chars]
        language = note.language or source.language

        print("[generate] Enhancing heuristic note")
        analysis = AlgorithmAnalysis(
            algorithm_type=note.title,
            title=note.title,
            problem=note.problem,
            pseudocode=note.pseudocode,
        )

        approach = self.approach(code, language, analysis)
        explanation = self.explanation(code, language, analysis)
        generated_cases = self.edge_cases(analysis)

        merged = merge_edge_cases(note.edge_cases, generated_cases)
        return Note(
            title=note.title,
            language=note.language,
            problem=note.problem,
            approach=approach,
            pseudocode=note.pseudocode,
            complexity=note.complexity,
            edge_cases=merged,
            examples=list(note.examples),
            explanation=explanation,
            code=note.code,
        )

    def test_connection(self) -> bool:
        """Verify basic LLM connectivity."""
        try:
            data = self._run_json_stage("connection", PromptTemplate.connection_check())
        except GenerationError as e:
            print(f"[llm] Connection test failed: {e}")
            return False
        return data.get("status") == "ok"


def merge_edge_cases(heuristic: List[str], generated: List[str]) -> List[str]:
    """Heuristic cases then new generated ones, capped at HYBRID_EDGE_CASE_LIMIT."""
    heuristic = dedupe(heuristic)
    fresh = [case for case in dedupe(generated) if case not in heuristic]
    keep = HYBRID_EDGE_CASE_LIMIT - min(HYBRID_GENERATED_SLOTS, len(fresh))
    return (heuristic[:keep] + fresh)[:HYBRID_EDGE_CASE_LIMIT]


def cleanup_note(note: Note) -> Note:
    """Normalize whitespace and drop empty edge cases / examples."""
    examples = [
        Example(
            input=normalize_text(example.input),
            output=normalize_text(example.output),
            note=normalize_text(example.note),
        )
        for example in note.examples
    ]
    return Note(
        title=(note.title or "").strip(),
        language=note.language,
        problem=normalize_text(note.problem),
        approach=normalize_text(note.approach),
        pseudocode=normalize_text(note.pseudocode),
        complexity=normalize_text(note.complexity),
        edge_cases=[case for case in (normalize_text(c) for c in note.edge_cases) if case],
        examples=[example for example in examples if not example.is_empty()],
        explanation=normalize_text(note.explanation),
        code=note.code,
    )


__all__ = [
    "NoteGenerationPipeline",
    "HYBRID_EDGE_CASE_LIMIT",
    "HYBRID_GENERATED_SLOTS",
    "merge_edge_cases",
    "cleanup_note",
]
