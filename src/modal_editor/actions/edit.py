"""Buffer edits driven by the cursor position."""

from __future__ import annotations

from modal_editor.modes.base_mode import EditorMode, ModeContext, ModeResult

from .core import noop
from .models import DeleteCharBeforeCursor, InsertChar, InsertNewLineAndSplit


def _edited(context: ModeContext, label: str, **extra: object) -> ModeResult:
    row, col = context.cursor.position
    payload = {"label": label, "row": row, "col": col, **extra}
    payload["version"] = context.buffer.version
    context.bus.emit("buffer.edit", payload)
    return ModeResult(consumed=True, status="edited", message=label)


def insert_char(context: ModeContext, action: InsertChar) -> ModeResult:
    cursor = context.cursor
    context.buffer.insert_char(cursor.document_row, cursor.col, action.char)
    cursor.set_column(cursor.col + 1)
    return _edited(context, "insert_char", char=action.char)


def delete_char_before_cursor(
    context: ModeContext, action: DeleteCharBeforeCursor
) -> ModeResult:
    del action
    cursor = context.cursor
    if not context.buffer.delete_char_before(cursor.document_row, cursor.col):
        return noop("line_start")
    cursor.set_column(cursor.col - 1)
    return _edited(context, "delete_char")


def insert_newline_and_split(
    context: ModeContext, action: InsertNewLineAndSplit
) -> ModeResult:
    cursor = context.cursor
    row = cursor.document_row
    col = context.buffer.line_len(row) if action.open_below else cursor.col
    indent = context.buffer.split_line(row, col)
    cursor.step_down(context.viewport)
    cursor.set_column(indent)
    result = _edited(context, "split_line", indent=indent)
    result.switch_to = EditorMode.INSERT
    return result


__all__ = ["delete_char_before_cursor", "insert_char", "insert_newline_and_split"]
