"""Text storage, cursor state, and range validation."""

from .document import BufferLoadError, TextBuffer
from .state import STATUS_LINE_ROWS, CursorState, Viewport
from .validation import BufferValidationError, Cursor, ensure_cursor, ensure_row

__all__ = [
    "BufferLoadError",
    "BufferValidationError",
    "Cursor",
    "CursorState",
    "STATUS_LINE_ROWS",
    "TextBuffer",
    "Viewport",
    "ensure_cursor",
    "ensure_row",
]
