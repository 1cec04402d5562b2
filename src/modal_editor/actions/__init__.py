"""Editing actions and the handlers that apply them.

Only the action variants are re-exported here; handler modules
(``core``, ``motion``, ``edit``) are imported by the engine directly.
"""

from .models import (
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
