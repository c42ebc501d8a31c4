import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


VALID_MODES = ("heuristic", "llm", "hybrid")
DEFAULT_MAX_CODE_CHARS = 20000


@dataclass(frozen=True)
class NotesConfig:
    """Configuration for note generation, loaded once at startup."""

    google_api_key: str
    llm_model: str
    default_mode: str
    notion_token: str
    notion_parent_page_id: str
    max_code_chars: int = DEFAULT_MAX_CODE_CHARS
    output_dir: str = "fixtures"

    @property
    def publishing_enabled(self) -> bool:
        return bool(self.notion_token and self.notion_parent_page_id)


def _parse_int(value: Optional[str], default: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _parse_mode(value: Optional[str], default: str = "llm") -> str:
    if value is None or value == "":
        return default
    mode = value.strip().lower()
    return mode if mode in VALID_MODES else "heuristic"


def load_config() -> NotesConfig:
    """Load configuration from environment variables."""
    load_dotenv()

    max_code_chars = _parse_int(os.getenv("MAX_CODE_CHARS"), DEFAULT_MAX_CODE_CHARS)
    if max_code_chars <= 0:
        max_code_chars = DEFAULT_MAX_CODE_CHARS

    config = NotesConfig(
        google_api_key=os.getenv("GOOGLE_API_KEY", ""),
        llm_model=os.getenv("LLM_MODEL", "gemini-2.0-flash"),
        default_mode=_parse_mode(os.getenv("NOTES_MODE")),
        notion_token=os.getenv("NOTION_TOKEN", ""),
        notion_parent_page_id=os.getenv("NOTION_PARENT_PAGE_ID", ""),
        max_code_chars=max_code_chars,
        output_dir=os.getenv("NOTES_OUTPUT_DIR", "fixtures") or "fixtures",
    )
    return config


__all__ = ["NotesConfig", "VALID_MODES", "DEFAULT_MAX_CODE_CHARS", "load_config"]
