"""CLI entry point for running as `python -m api.cli`.

Usage:
    python -m api.cli <file>                       # default mode from NOTES_MODE
    python -m api.cli <file> --mode heuristic      # no LLM calls
    python -m api.cli <file> --json-out out.json   # explicit output file
"""

import sys

from .main import main


if __name__ == "__main__":
    sys.exit(main())
