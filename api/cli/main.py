"""Command-line note generator.

Usage:
    python -m api.cli path/to/solution.cpp
    python -m api.cli solution.py --mode heuristic --json-out notes/
    python -m api.cli solution.js --no-save --no-publish
"""

import argparse
import sys
from typing import List, Optional

from ingestion.loader import load_source
from shared.config import VALID_MODES, NotesConfig, load_config
from shared.exceptions import PublishError, SourceReadError
from shared.text_utils import preview_line

from ..use_cases import NoteUseCase, to_json


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Infer the algorithm in a source file and write a structured note",
    )
    parser.add_argument("file_path", help="Source file to analyze")
    parser.add_argument(
        "--mode",
        choices=VALID_MODES,
        help="Generation mode (default: NOTES_MODE env or llm)",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Preview only, do not write the JSON note",
    )
    parser.add_argument(
        "--json-out",
        help="Output .json file, or a directory for <title>.json",
    )
    parser.add_argument(
        "--no-publish",
        action="store_true",
        help="Do not publish to Notion even when configured",
    )
    return parser


def run(
    args: argparse.Namespace,
    config: Optional[NotesConfig] = None,
    use_case: Optional[NoteUseCase] = None,
) -> int:
    config = config or load_config()
    use_case = use_case or NoteUseCase(config)

    try:
        source = load_source(args.file_path)
    except SourceReadError as e:
        print(f"[error] Error reading file: {e}")
        return 1

    note = use_case.generate(source, mode=args.mode)

    if args.no_save:
        print("[ok] Preview only (no file saved)")
    else:
        try:
            out_path = use_case.save(note, args.json_out)
        except OSError as e:
            print(f"[error] Failed to write note: {e}")
            print("[info] Falling back to printing JSON to console...")
            print(to_json(note))
            return 1
        print(f"[ok] Created note: {out_path}")

    print(f"Problem (preview): {preview_line(note.problem)}")

    if config.publishing_enabled and not args.no_publish:
        try:
            page = use_case.publish(note)
            print(f"[ok] Posted to Notion. Page id: {page.get('id')}")
        except PublishError as e:
            print(f"[warn] Notion post failed: {e}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    return run(parser.parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["create_parser", "run", "main"]
