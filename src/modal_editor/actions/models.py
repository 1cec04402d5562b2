"""Semantic editing commands produced by the input mapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover
    from modal_editor.modes.base_mode import EditorMode


@dataclass(frozen=True, slots=True)
class MoveLeft:
    pass


@dataclass(frozen=True, slots=True)
class MoveRight:
    pass


@dataclass(frozen=True, slots=True)
class MoveUp:
    pass


@dataclass(frozen=True, slots=True)
class MoveDown:
    pass


@dataclass(frozen=True, slots=True)
class MoveToLineBegin:
    pass


@dataclass(frozen=True, slots=True)
class InsertChar:
    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"InsertChar takes a single character, got {self.char!r}")


@dataclass(frozen=True, slots=True)
class DeleteCharBeforeCursor:
    pass


@dataclass(frozen=True, slots=True)
class InsertNewLineAndSplit:
    """Split the current line at the cursor.

    With ``open_below`` the split happens at the end of the line, which
    opens an empty (indented) line under the cursor.
    """

    open_below: bool = False


@dataclass(frozen=True, slots=True)
class SwitchMode:
    mode: "EditorMode"


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Action = Union[
    MoveLeft,
    MoveRight,
    MoveUp,
    MoveDown,
    MoveToLineBegin,
    InsertChar,
    DeleteCharBeforeCursor,
    InsertNewLineAndSplit,
    SwitchMode,
    Quit,
]


def action_name(action: Action) -> str:
    return type(action).__name__


__all__ = [
    "Action",
    "DeleteCharBeforeCursor",
    "InsertChar",
    "InsertNewLineAndSplit",
    "MoveDown",
    "MoveLeft",
    "MoveRight",
    "MoveToLineBegin",
    "MoveUp",
    "Quit",
    "SwitchMode",
    "action_name",
]
