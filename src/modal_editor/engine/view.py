"""Read-only snapshot of what the screen should show."""

from __future__ import annotations

from dataclasses import dataclass

from modal_editor.buffer import CursorState, TextBuffer, Viewport
from modal_editor.modes.base_mode import MODE_CONFIGS, EditorMode


@dataclass(frozen=True, slots=True)
class EditorView:
    """Visible window of the buffer plus status line data.

    ``lines`` always holds ``height`` entries; rows past the end of the
    buffer are empty strings. ``cursor`` is in screen coordinates.
    """

    lines: tuple[str, ...]
    cursor: tuple[int, int]
    mode: EditorMode
    mode_label: str
    status_style: str
    name: str
    scroll: int
    width: int
    height: int

    @classmethod
    def capture(
        cls,
        buffer: TextBuffer,
        cursor: CursorState,
        viewport: Viewport,
        mode: EditorMode,
    ) -> "EditorView":
        document = buffer.lines
        window = document[cursor.scroll : cursor.scroll + viewport.height]
        padding = ("",) * (viewport.height - len(window))
        config = MODE_CONFIGS[mode]
        return cls(
            lines=tuple(window) + padding,
            cursor=(cursor.row, cursor.col),
            mode=mode,
            mode_label=config.label,
            status_style=config.status_style,
            name=buffer.name,
            scroll=cursor.scroll,
            width=viewport.width,
            height=viewport.height,
        )


__all__ = ["EditorView"]
