"""Cursor motions.

Horizontal motions update ``desired_col``; vertical motions only read it,
so a run of up/down moves through short lines returns to the original
column on the next long line.
"""

from __future__ import annotations

from modal_editor.modes.base_mode import ModeContext, ModeResult

from .core import noop
from .models import MoveDown, MoveLeft, MoveRight, MoveToLineBegin, MoveUp


def _moved(context: ModeContext) -> ModeResult:
    row, col = context.cursor.position
    return ModeResult(consumed=True, status="moved", message=f"{row}:{col}")


def move_left(context: ModeContext, action: MoveLeft) -> ModeResult:
    del action
    cursor = context.cursor
    if cursor.col == 0:
        return noop("line_start")
    cursor.set_column(cursor.col - 1)
    return _moved(context)


def move_right(context: ModeContext, action: MoveRight) -> ModeResult:
    del action
    cursor = context.cursor
    if cursor.col >= context.buffer.line_len(cursor.document_row):
        return noop("line_end")
    cursor.set_column(cursor.col + 1)
    return _moved(context)


def move_up(context: ModeContext, action: MoveUp) -> ModeResult:
    del action
    cursor = context.cursor
    if cursor.document_row == 0:
        return noop("top")
    cursor.step_up()
    cursor.restore_column(context.buffer.line_len(cursor.document_row))
    return _moved(context)


def move_down(context: ModeContext, action: MoveDown) -> ModeResult:
    del action
    cursor = context.cursor
    if cursor.document_row >= context.buffer.line_count - 1:
        return noop("bottom")
    cursor.step_down(context.viewport)
    cursor.restore_column(context.buffer.line_len(cursor.document_row))
    return _moved(context)


def move_to_line_begin(context: ModeContext, action: MoveToLineBegin) -> ModeResult:
    del action
    context.cursor.set_column(0)
    return _moved(context)


__all__ = [
    "move_down",
    "move_left",
    "move_right",
    "move_to_line_begin",
    "move_up",
]
