"""Built-in key bindings for Normal and Insert mode."""

from __future__ import annotations

from modal_editor.actions import (
    DeleteCharBeforeCursor,
    InsertNewLineAndSplit,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveToLineBegin,
    MoveUp,
    Quit,
    SwitchMode,
)
from modal_editor.modes.base_mode import EditorMode

from .models import Binding
from .registry import KeymapRegistry

NORMAL = EditorMode.NORMAL
INSERT = EditorMode.INSERT

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding("normal.quit", NORMAL, "q", Quit(), "Quit without saving"),
    Binding(
        "normal.enter_insert", NORMAL, "i", SwitchMode(INSERT), "Enter insert mode"
    ),
    Binding(
        "normal.open_below",
        NORMAL,
        "o",
        InsertNewLineAndSplit(open_below=True),
        "Open a line below and enter insert mode",
    ),
    Binding("normal.line_begin", NORMAL, "0", MoveToLineBegin(), "Go to column 0"),
    Binding("normal.left", NORMAL, "h", MoveLeft(), "Move left"),
    Binding("normal.left_arrow", NORMAL, "LEFT", MoveLeft(), "Move left"),
    Binding("normal.right", NORMAL, "l", MoveRight(), "Move right"),
    Binding("normal.right_arrow", NORMAL, "RIGHT", MoveRight(), "Move right"),
    Binding("normal.up", NORMAL, "k", MoveUp(), "Move up"),
    Binding("normal.up_arrow", NORMAL, "UP", MoveUp(), "Move up"),
    Binding("normal.down", NORMAL, "j", MoveDown(), "Move down"),
    Binding("normal.down_arrow", NORMAL, "DOWN", MoveDown(), "Move down"),
    Binding(
        "insert.exit_escape", INSERT, "ESC", SwitchMode(NORMAL), "Leave insert mode"
    ),
    Binding(
        "insert.backspace",
        INSERT,
        "BACKSPACE",
        DeleteCharBeforeCursor(),
        "Delete the character before the cursor",
    ),
    Binding(
        "insert.newline",
        INSERT,
        "ENTER",
        InsertNewLineAndSplit(),
        "Split the line at the cursor",
    ),
)


def load_default_keymaps(registry: KeymapRegistry, *, replace: bool = False) -> None:
    """Register every built-in binding."""

    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=replace)


__all__ = ["DEFAULT_BINDINGS", "load_default_keymaps"]
