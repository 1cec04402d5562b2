"""Editing engine orchestrating buffer, cursor, and mode."""

from .edit_engine import EditEngine
from .view import EditorView

__all__ = ["EditEngine", "EditorView"]
