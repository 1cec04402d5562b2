"""Rich renderables for the buffer window and the status line."""

from __future__ import annotations

from rich.text import Text

from modal_editor.engine import EditorView

CURSOR_STYLE = "reverse"


def render_buffer(view: EditorView) -> Text:
    """One screen row per visible line, cropped to the viewport width.

    The cursor cell is drawn reversed; past the end of a line it is a
    reversed space.
    """

    text = Text(no_wrap=True, overflow="crop", end="")
    cursor_row, cursor_col = view.cursor
    # No horizontal scrolling: pin the cursor to the last visible column.
    cursor_col = min(cursor_col, view.width - 1)
    for index, line in enumerate(view.lines):
        if index:
            text.append("\n")
        visible = line[: view.width]
        if index != cursor_row:
            text.append(visible)
            continue
        text.append(visible[:cursor_col])
        text.append(visible[cursor_col : cursor_col + 1] or " ", style=CURSOR_STYLE)
        text.append(visible[cursor_col + 1 :])
    return text


def render_status(view: EditorView) -> Text:
    """`` NOR  name`` padded to the full width in the mode's style."""

    label = f" {view.mode_label}  {view.name}"
    return Text(
        label.ljust(view.width)[: view.width],
        style=view.status_style,
        no_wrap=True,
        overflow="crop",
        end="",
    )


__all__ = ["CURSOR_STYLE", "render_buffer", "render_status"]
