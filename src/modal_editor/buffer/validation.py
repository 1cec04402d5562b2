"""Range checks shared by the buffer primitives and the engine."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

Cursor = Tuple[int, int]  # (document row, column)


class BufferValidationError(RuntimeError):
    """Raised when a row or column falls outside the buffer.

    The engine keeps the cursor in range by construction, so this always
    signals a defect rather than bad user input.
    """

    def __init__(self, message: str, *, cursor: Optional[Cursor] = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_row(lines: Sequence[str], row: int) -> int:
    if row < 0 or row >= len(lines):
        raise BufferValidationError(
            f"Row {row} out of range (0..{len(lines) - 1})", cursor=(row, 0)
        )
    return row


def ensure_cursor(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    ensure_row(lines, row)
    if col < 0 or col > len(lines[row]):
        raise BufferValidationError(
            f"Column {col} out of range for row {row} (0..{len(lines[row])})",
            cursor=cursor,
        )
    return cursor


__all__ = ["BufferValidationError", "Cursor", "ensure_cursor", "ensure_row"]
