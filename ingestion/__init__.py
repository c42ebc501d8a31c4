"""Ingestion layer for code notes.

Reads source files into SourceUnit values.

Rules:
- MUST NOT analyze, generate or publish
- MUST NOT import analysis, generation, publishing, api
"""

from .loader import load_source, source_from_text

__all__ = ["load_source", "source_from_text"]
