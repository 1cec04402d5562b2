"""Mode switching and quitting."""

from __future__ import annotations

from modal_editor.modes.base_mode import ModeContext, ModeResult

from .models import Quit, SwitchMode


def switch_mode(context: ModeContext, action: SwitchMode) -> ModeResult:
    del context
    return ModeResult(
        consumed=True,
        switch_to=action.mode,
        status="mode",
        message=f"enter_{action.mode.value}",
    )


def quit_editor(context: ModeContext, action: Quit) -> ModeResult:
    del action
    context.bus.emit("editor.quit", {"buffer": context.buffer.name})
    return ModeResult(consumed=True, status="quit", message="quit", quit=True)


def noop(message: str) -> ModeResult:
    return ModeResult(consumed=True, status="noop", message=message)


__all__ = ["noop", "quit_editor", "switch_mode"]
