"""Translate raw input events into editing actions."""

from __future__ import annotations

from typing import Dict, Optional

from modal_editor.actions import Action
from modal_editor.modes import (
    EditorMode,
    InsertMode,
    KeyInput,
    Mode,
    NormalMode,
    RawEvent,
)

from .defaults import load_default_keymaps
from .registry import KeymapRegistry


class InputMapper:
    """``(mode, event) -> action`` lookup over the binding table.

    The mapper holds no editor state; the same event in the same mode
    always yields the same action. Resize events never map to an action.
    """

    def __init__(self, registry: KeymapRegistry | None = None) -> None:
        if registry is None:
            registry = KeymapRegistry(logger_name="modal_editor.keymaps")
            load_default_keymaps(registry)
        self.registry = registry
        self._modes: Dict[EditorMode, Mode] = {
            EditorMode.NORMAL: NormalMode(registry),
            EditorMode.INSERT: InsertMode(registry),
        }

    def map(self, mode: EditorMode, event: RawEvent) -> Optional[Action]:
        if not isinstance(event, KeyInput):
            return None
        return self._modes[mode].map_key(event)


__all__ = ["InputMapper"]
