"""The single component allowed to mutate buffer, cursor, and mode."""

from __future__ import annotations

from typing import Any, Callable, Dict

from modal_editor.actions import (
    Action,
    DeleteCharBeforeCursor,
    InsertChar,
    InsertNewLineAndSplit,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveToLineBegin,
    MoveUp,
    Quit,
    SwitchMode,
    action_name,
)
from modal_editor.actions import core, edit, motion
from modal_editor.buffer import (
    BufferValidationError,
    CursorState,
    TextBuffer,
    Viewport,
    ensure_cursor,
)
from modal_editor.modes import EditorMode, ModeBus, ModeContext, ModeManager, ModeResult
from modal_editor.runtime import telemetry

from .view import EditorView

ActionHandler = Callable[[ModeContext, Any], ModeResult]

_ACTION_HANDLERS: Dict[type, ActionHandler] = {
    MoveLeft: motion.move_left,
    MoveRight: motion.move_right,
    MoveUp: motion.move_up,
    MoveDown: motion.move_down,
    MoveToLineBegin: motion.move_to_line_begin,
    InsertChar: edit.insert_char,
    DeleteCharBeforeCursor: edit.delete_char_before_cursor,
    InsertNewLineAndSplit: edit.insert_newline_and_split,
    SwitchMode: core.switch_mode,
    Quit: core.quit_editor,
}


class EditEngine:
    """Applies actions to an exclusively owned buffer and cursor.

    Every ``apply`` call runs to completion: the cursor is re-clamped
    against the viewport and the (possibly edited) line before and after
    the handler, then checked. A cursor that still violates the range
    invariants raises ``BufferValidationError``.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        *,
        viewport: Viewport | None = None,
        cursor: CursorState | None = None,
        bus: ModeBus | None = None,
        initial_mode: EditorMode = EditorMode.NORMAL,
    ) -> None:
        self.bus = bus or ModeBus()
        self._context = ModeContext(
            buffer=buffer,
            cursor=cursor or CursorState(),
            viewport=viewport or Viewport(),
            bus=self.bus,
        )
        self.modes = ModeManager(initial=initial_mode, bus=self.bus)
        self._running = True
        self.logger = telemetry.get_logger("modal_editor.engine")
        self._reclamp()
        self._validate()

    @property
    def buffer(self) -> TextBuffer:
        return self._context.buffer

    @property
    def cursor(self) -> CursorState:
        return self._context.cursor

    @property
    def viewport(self) -> Viewport:
        return self._context.viewport

    @property
    def mode(self) -> EditorMode:
        return self.modes.active

    @property
    def running(self) -> bool:
        return self._running

    def resize(self, columns: int, rows: int) -> Viewport:
        """Adopt a new terminal size.

        The cursor is not moved here; the next ``apply`` or ``view`` call
        brings it back inside the new viewport.
        """

        viewport = Viewport.from_terminal(columns, rows)
        self._context.viewport = viewport
        self.bus.emit(
            "viewport.resize", {"width": viewport.width, "height": viewport.height}
        )
        return viewport

    def apply(self, action: Action) -> ModeResult:
        handler = _ACTION_HANDLERS.get(type(action))
        if handler is None:
            raise TypeError(f"Unsupported action: {action!r}")

        name = action_name(action)
        with telemetry.span(
            f"engine::{name}",
            component="engine",
            metadata={"mode": self.mode.value, "cursor": self.cursor.position},
        ) as handle:
            self._reclamp()
            result = handler(self._context, action)
            if result.switch_to is not None:
                self.modes.switch_mode(result.switch_to)
            if result.quit:
                self._running = False
            self._reclamp()
            self._validate()
            handle.add_metadata("status", result.status)
        return result

    def view(self) -> EditorView:
        self._reclamp()
        return EditorView.capture(self.buffer, self.cursor, self.viewport, self.mode)

    def _reclamp(self) -> None:
        cursor = self.cursor
        cursor.fit_viewport(self.viewport)
        cursor.clamp_column(self.buffer.line_len(cursor.document_row))

    def _validate(self) -> None:
        cursor = self.cursor
        if cursor.scroll < 0 or not 0 <= cursor.row < self.viewport.height:
            raise BufferValidationError(
                f"Cursor row {cursor.row} (scroll {cursor.scroll}) outside "
                f"viewport of height {self.viewport.height}",
                cursor=cursor.position,
            )
        ensure_cursor(self.buffer.lines, cursor.position)


__all__ = ["EditEngine"]
