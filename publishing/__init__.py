"""Publishing layer: pushes finished notes to a document workspace."""

from .notion import NotionPublisher, map_to_notion_language, note_to_blocks

__all__ = ["NotionPublisher", "map_to_notion_language", "note_to_blocks"]
