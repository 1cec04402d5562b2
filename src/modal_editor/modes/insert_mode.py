"""Insert mode: literal text entry."""

from __future__ import annotations

from typing import Optional

from modal_editor.actions import Action, InsertChar

from .base_mode import EditorMode, KeyInput, Mode

# Keys with these modifiers never produce text.
_COMMAND_MODIFIERS = frozenset({"CTRL", "ALT", "META", "SUPER"})


class InsertMode(Mode):
    name = EditorMode.INSERT

    def map_key(self, key: KeyInput) -> Optional[Action]:
        action = super().map_key(key)
        if action is not None:
            return action
        if _COMMAND_MODIFIERS.intersection(key.modifiers):
            return None
        if key.text is not None and len(key.text) == 1 and key.text.isprintable():
            return InsertChar(key.text)
        return None
