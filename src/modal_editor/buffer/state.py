"""Cursor position and viewport arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

from .validation import Cursor

STATUS_LINE_ROWS = 1


@dataclass(frozen=True, slots=True)
class Viewport:
    """Visible text area: terminal size minus the status line."""

    width: int = 80
    height: int = 23

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", max(1, self.width))
        object.__setattr__(self, "height", max(1, self.height))

    @classmethod
    def from_terminal(
        cls, columns: int, rows: int, *, status_rows: int = STATUS_LINE_ROWS
    ) -> "Viewport":
        return cls(width=columns, height=rows - status_rows)


@dataclass(slots=True)
class CursorState:
    """Cursor position relative to the viewport.

    ``row`` counts from the top of the viewport, ``scroll`` is the number of
    document lines hidden above it. ``desired_col`` is the column vertical
    moves try to return to.
    """

    row: int = 0
    col: int = 0
    desired_col: int = 0
    scroll: int = 0

    @property
    def document_row(self) -> int:
        return self.row + self.scroll

    @property
    def position(self) -> Cursor:
        return (self.document_row, self.col)

    def step_down(self, viewport: Viewport) -> None:
        if self.row < viewport.height - 1:
            self.row += 1
        else:
            self.scroll += 1

    def step_up(self) -> None:
        if self.row > 0:
            self.row -= 1
        elif self.scroll > 0:
            self.scroll -= 1

    def restore_column(self, line_len: int) -> None:
        """Land on ``desired_col``, clamped to the current line."""

        self.col = min(self.desired_col, line_len)

    def set_column(self, col: int) -> None:
        self.col = col
        self.desired_col = col

    def fit_viewport(self, viewport: Viewport) -> None:
        """Shift ``scroll`` so the cursor row sits inside ``viewport``.

        The document row is preserved.
        """

        overflow = self.row - (viewport.height - 1)
        if overflow > 0:
            self.row -= overflow
            self.scroll += overflow

    def clamp_column(self, line_len: int) -> None:
        self.col = max(0, min(self.col, line_len))


__all__ = ["CursorState", "STATUS_LINE_ROWS", "Viewport"]
