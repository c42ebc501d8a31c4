"""Note use case orchestration.

Pipeline:
1. Generate a note in the requested mode (heuristic / llm / hybrid)
2. Normalize it to the note schema
3. Save it as JSON and optionally publish it

Rules:
- MAY import analysis, generation, publishing, shared, domain
- MUST NOT implement heuristics or prompt logic directly
"""

import json
import os
from typing import Any, Callable, Dict, Optional

from analysis import build_heuristic_note, normalize_note
from domain import Note, SourceUnit
from generation import GeminiLLMClient, NoteGenerationPipeline
from publishing import NotionPublisher
from shared.config import VALID_MODES, NotesConfig
from shared.exceptions import GenerationError, PublishError
from shared.text_utils import safe_filename


PipelineFactory = Callable[[NotesConfig], NoteGenerationPipeline]
PublisherFactory = Callable[[NotesConfig], NotionPublisher]


def default_pipeline_factory(config: NotesConfig) -> NoteGenerationPipeline:
    client = GeminiLLMClient(model=config.llm_model, api_key=config.google_api_key or None)
    return NoteGenerationPipeline(client, max_code_chars=config.max_code_chars)


def default_publisher_factory(config: NotesConfig) -> NotionPublisher:
    return NotionPublisher(config.notion_token, config.notion_parent_page_id)


class NoteUseCase:
    """Orchestrates note generation, persistence and publishing.

    Example:
        >>> use_case = NoteUseCase(load_config())
        >>> note = use_case.generate(load_source("selection_sort.cpp"), mode="heuristic")
        >>> path = use_case.save(note)
    """

    def __init__(
        self,
        config: NotesConfig,
        *,
        pipeline_factory: PipelineFactory = default_pipeline_factory,
        publisher_factory: PublisherFactory = default_publisher_factory,
    ):
        """Initialize NoteUseCase.

        Args:
            config: Configuration loaded at startup
            pipeline_factory: Builds the LLM pipeline on first LLM/hybrid use
            publisher_factory: Builds the publisher on first publish
        """
        self.config = config
        self._pipeline_factory = pipeline_factory
        self._publisher_factory = publisher_factory
        self._pipeline: Optional[NoteGenerationPipeline] = None

    def _get_pipeline(self) -> NoteGenerationPipeline:
        if self._pipeline is None:
            self._pipeline = self._pipeline_factory(self.config)
        return self._pipeline

    def _heuristic(self, source: SourceUnit) -> Note:
        return build_heuristic_note(source, self.config.max_code_chars)

    def generate(self, source: SourceUnit, mode: Optional[str] = None) -> Note:
        """
        Generate a note for *source*.

        LLM and hybrid failures fall back to the heuristic path with a
        warning; the heuristic path itself has no fallback.

        Args:
            source: Source to describe
            mode: "heuristic", "llm" or "hybrid" (default from config)

        Returns:
            Normalized Note
        """
        mode = (mode or self.config.default_mode).strip().lower()
        if mode not in VALID_MODES:
            print(f"[warn] Unknown mode '{mode}'. Falling back to heuristic.")
            mode = "heuristic"

        if mode == "heuristic":
            print("[generate] Using heuristic pattern matching...")
            return self._heuristic(source)

        try:
            pipeline = self._get_pipeline()
            if mode == "llm":
                print("[generate] Using multi-stage LLM analysis...")
                note = pipeline.summarize(source)
            else:
                print("[generate] Step 1: Heuristic analysis...")
                heuristic_note = self._heuristic(source)
                print("[generate] Step 2: Enhancing with LLM...")
                note = pipeline.enhance(heuristic_note, source)
        except GenerationError as e:
            print(f"[warn] LLM generation failed at stage '{e.stage}': {e.message}")
            print("[generate] Falling back to heuristic generation...")
            return self._heuristic(source)
        except Exception as e:
            print(f"[warn] LLM setup failed at stage 'client': {e}")
            print("[generate] Falling back to heuristic generation...")
            return self._heuristic(source)

        return normalize_note(note, source, self.config.max_code_chars)

    def resolve_output_path(self, note: Note, json_out: Optional[str] = None) -> str:
        """
        Decide where the JSON artifact goes, creating directories as needed.

        A *json_out* ending in ``.json`` is a file path; any other value is a
        directory that receives ``<title>.json``.
        """
        filename = f"{safe_filename(note.title)}.json"
        if json_out:
            if json_out.lower().endswith(".json"):
                out_path = os.path.abspath(json_out)
                os.makedirs(os.path.dirname(out_path), exist_ok=True)
                return out_path
            os.makedirs(json_out, exist_ok=True)
            return os.path.join(json_out, filename)

        os.makedirs(self.config.output_dir, exist_ok=True)
        return os.path.join(self.config.output_dir, filename)

    def save(self, note: Note, json_out: Optional[str] = None) -> str:
        """Write *note* as pretty-printed JSON and return the path."""
        out_path = self.resolve_output_path(note, json_out)
        with open(out_path, "w", encoding="utf-8") as handle:
            handle.write(to_json(note))
        return out_path

    def publish(self, note: Note) -> Dict[str, Any]:
        """Publish *note*; raises PublishError on failure."""
        try:
            publisher = self._publisher_factory(self.config)
        except ImportError as e:
            raise PublishError(f"notion-client is not installed: {e}") from e
        return publisher.publish(note)


def to_json(note: Note) -> str:
    return json.dumps(note.to_dict(), indent=2, ensure_ascii=False)


__all__ = ["NoteUseCase", "default_pipeline_factory", "default_publisher_factory", "to_json"]
