"""Textual host for the editor."""

from .controller import BUS_EVENTS, TextualEditorAdapter, TextualUIHooks

__all__ = ["BUS_EVENTS", "TextualEditorAdapter", "TextualUIHooks"]
