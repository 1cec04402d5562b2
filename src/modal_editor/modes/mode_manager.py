"""Two-state mode machine: Normal <-> Insert."""

from __future__ import annotations

from typing import Dict, FrozenSet

from modal_editor.runtime import telemetry

from .base_mode import EditorMode, ModeBus

TRANSITIONS: Dict[EditorMode, FrozenSet[EditorMode]] = {
    EditorMode.NORMAL: frozenset({EditorMode.INSERT}),
    EditorMode.INSERT: frozenset({EditorMode.NORMAL}),
}


class ModeTransitionError(RuntimeError):
    """Raised for a mode switch the state machine does not allow."""


class ModeManager:
    """Owns the active mode and validates every switch."""

    def __init__(
        self,
        *,
        initial: EditorMode = EditorMode.NORMAL,
        bus: ModeBus | None = None,
    ) -> None:
        self._active = initial
        self.bus = bus or ModeBus()
        self.logger = telemetry.get_logger("modal_editor.modes")

    @property
    def active(self) -> EditorMode:
        return self._active

    def switch_mode(self, target: EditorMode) -> bool:
        """Enter ``target``; returns False when already there."""

        if target == self._active:
            return False
        if target not in TRANSITIONS[self._active]:
            raise ModeTransitionError(
                f"Cannot switch from '{self._active.value}' to '{target.value}'"
            )
        previous = self._active
        self._active = target
        telemetry.record_event(
            "mode.switch", data={"from": previous.value, "to": target.value}
        )
        self.bus.emit("mode.switch", {"from": previous, "to": target})
        return True
