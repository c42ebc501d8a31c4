"""Publish notes as Notion pages.

Converts a Note into Notion child blocks and creates a page under a parent
page. Rich text is split into 2000-character segments and children are sent
in batches of 100, which are the Notion API limits.
"""

import re
from typing import Any, Dict, List, Optional

from domain import Note
from shared.exceptions import PublishError


RICH_TEXT_LIMIT = 2000
CHILDREN_BATCH = 100
PLAIN_TEXT = "plain text"

NOTION_LANGUAGES: Dict[str, str] = {
    "js": "javascript",
    "javascript": "javascript",
    "ts": "typescript",
    "typescript": "typescript",
    "py": "python",
    "python": "python",
    "cpp": "c++",
    "cc": "c++",
    "cxx": "c++",
    "hpp": "c++",
    "c++": "c++",
    "c": "c",
    "h": "c",
    "java": "java",
    "c#": "c#",
    "cs": "c#",
    "php": "php",
    "rb": "ruby",
    "ruby": "ruby",
    "go": "go",
    "golang": "go",
    "rs": "rust",
    "rust": "rust",
    "sql": "sql",
    "sh": "shell",
    "bash": "bash",
    "ps1": "powershell",
    "powershell": "powershell",
    "html": "html",
    "css": "css",
    "json": "json",
    "xml": "xml",
    "md": "markdown",
    "markdown": "markdown",
    "plain": PLAIN_TEXT,
    "text": PLAIN_TEXT,
    "txt": PLAIN_TEXT,
    "swift": "swift",
    "kt": "kotlin",
    "kotlin": "kotlin",
    "scala": "scala",
    "r": "r",
    "dart": "dart",
    "makefile": "makefile",
    "dockerfile": "docker",
}

# Checked in order after the exact table misses.
_FUZZY_LANGUAGES = (
    (("c++", "cpp"), "c++"),
    (("c#", "csharp"), "c#"),
    (("python",), "python"),
    (("typescript",), "typescript"),
    (("javascript", "js"), "javascript"),
    (("java",), "java"),
    (("html",), "html"),
    (("json",), "json"),
    (("xml",), "xml"),
    (("sql",), "sql"),
)

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def map_to_notion_language(lang_hint: Optional[str]) -> str:
    """Map a file extension / language hint to a Notion code block language."""
    if not lang_hint or not isinstance(lang_hint, str):
        return PLAIN_TEXT
    hint = lang_hint.strip().lower()
    if hint in NOTION_LANGUAGES:
        return NOTION_LANGUAGES[hint]
    for needles, language in _FUZZY_LANGUAGES:
        if any(needle in hint for needle in needles):
            return language
    return PLAIN_TEXT


def rich_text(content: str) -> List[Dict[str, Any]]:
    content = content or ""
    chunks = [content[i : i + RICH_TEXT_LIMIT] for i in range(0, len(content), RICH_TEXT_LIMIT)]
    return [{"type": "text", "text": {"content": chunk}} for chunk in chunks or [""]]


def _text_block(block_type: str, content: str) -> Dict[str, Any]:
    return {"object": "block", "type": block_type, block_type: {"rich_text": rich_text(content)}}


def _code_block(content: str, language: str) -> Dict[str, Any]:
    return {
        "object": "block",
        "type": "code",
        "code": {"rich_text": rich_text(content), "language": language},
    }


def _paragraphs(text: str) -> List[Dict[str, Any]]:
    return [_text_block("paragraph", p) for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def note_to_blocks(note: Note) -> List[Dict[str, Any]]:
    """Convert a note to Notion child blocks, skipping empty sections."""
    blocks: List[Dict[str, Any]] = []
    language = map_to_notion_language(note.language)

    blocks.append(_text_block("heading_1", note.problem or note.title or "Code Note"))

    if note.approach:
        first_line = (note.approach.split("\n")[0] or "")[:200]
        blocks.append(_text_block("paragraph", first_line))
        blocks.append(_text_block("heading_2", "Approach"))
        blocks.extend(_paragraphs(note.approach))

    if note.pseudocode:
        blocks.append(_text_block("heading_2", "Pseudocode"))
        blocks.append(_code_block(note.pseudocode, PLAIN_TEXT))

    if note.complexity:
        blocks.append(_text_block("heading_2", "Complexity"))
        blocks.append(_text_block("paragraph", note.complexity))

    if note.edge_cases:
        blocks.append(_text_block("heading_2", "Edge cases"))
        blocks.extend(_text_block("bulleted_list_item", case) for case in note.edge_cases)

    if note.examples:
        blocks.append(_text_block("heading_2", "Examples"))
        for idx, example in enumerate(note.examples, 1):
            blocks.append(_text_block("heading_3", f"Example {idx} - input"))
            blocks.append(_code_block(example.input, language))
            blocks.append(_text_block("heading_3", f"Example {idx} - output"))
            blocks.append(_code_block(example.output, PLAIN_TEXT))
            if example.note:
                blocks.append(_text_block("paragraph", example.note))

    if note.explanation:
        blocks.append(_text_block("heading_2", "Explanation"))
        blocks.extend(_paragraphs(note.explanation))

    if note.code:
        blocks.append(_text_block("heading_2", "Solution (code)"))
        blocks.append(_code_block(note.code, language))

    return blocks


class NotionPublisher:
    """Creates one Notion page per note under a fixed parent page.

    Example:
        >>> publisher = NotionPublisher(config.notion_token, config.notion_parent_page_id)
        >>> page = publisher.publish(note)
        >>> print(page["id"])
    """

    def __init__(self, token: str, parent_page_id: str, client: Any = None):
        """Initialize publisher.

        Args:
            token: Notion integration token
            parent_page_id: Page under which notes are created
            client: Optional pre-built notion_client.Client
        """
        if not token or not parent_page_id:
            raise PublishError("NOTION_TOKEN and NOTION_PARENT_PAGE_ID are required to publish")
        if client is None:
            from notion_client import Client

            client = Client(auth=token)
        self._client = client
        self.parent_page_id = parent_page_id

    def publish(self, note: Note) -> Dict[str, Any]:
        """
        Create the page for *note*.

        Returns:
            The created page object as returned by Notion

        Raises:
            PublishError: If any API call fails
        """
        children = note_to_blocks(note)
        title = note.title or note.problem or "Code Note"
        try:
            page = self._client.pages.create(
                parent={"page_id": self.parent_page_id},
                properties={"title": {"title": rich_text(title[:RICH_TEXT_LIMIT])}},
                children=children[:CHILDREN_BATCH],
            )
            for start in range(CHILDREN_BATCH, len(children), CHILDREN_BATCH):
                self._client.blocks.children.append(
                    block_id=page["id"],
                    children=children[start : start + CHILDREN_BATCH],
                )
        except Exception as e:
            raise PublishError(f"Notion API call failed: {e}") from e
        return page


__all__ = [
    "NOTION_LANGUAGES",
    "map_to_notion_language",
    "rich_text",
    "note_to_blocks",
    "NotionPublisher",
]
