"""Textual host adapter for the live preview editor."""

from .controller import TextualPreviewAdapter, TextualUIHooks

__all__ = ["TextualPreviewAdapter", "TextualUIHooks"]
