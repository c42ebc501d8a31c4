"""Generation layer for LLM-backed notes.

Components:
- GeminiLLMClient: LLM client using Google Gemini API
- PromptTemplate: Prompts for every pipeline stage
- NoteGenerationPipeline: Six sequential stages, plus hybrid enhancement

Rules:
- MAY import domain and shared
- MUST NOT import analysis, publishing or api
"""

from .client import GeminiLLMClient, LLMClientProtocol
from .models import AlgorithmAnalysis, LLMResponse
from .parsing import parse_json_response
from .pipeline import (
    HYBRID_EDGE_CASE_LIMIT,
    HYBRID_GENERATED_SLOTS,
    NoteGenerationPipeline,
    cleanup_note,
    merge_edge_cases,
)
from .prompts import PromptTemplate, StagePrompt

__all__ = [
    # Client
    "GeminiLLMClient",
    "LLMClientProtocol",
    # Models
    "LLMResponse",
    "AlgorithmAnalysis",
    # Prompts
    "PromptTemplate",
    "StagePrompt",
    # Pipeline
    "NoteGenerationPipeline",
    "HYBRID_EDGE_CASE_LIMIT",
    "HYBRID_GENERATED_SLOTS",
    "merge_edge_cases",
    "cleanup_note",
    "parse_json_response",
]
