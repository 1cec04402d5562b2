"""Key binding record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from modal_editor.actions import Action
    from modal_editor.modes.base_mode import EditorMode


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key token in one mode with an action."""

    id: str
    mode: "EditorMode"
    key: str
    action: "Action"
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.key:
            raise ValueError("binding key cannot be empty")

    @property
    def signature(self) -> tuple[str, str]:
        return (self.mode.value, self.key)


__all__ = ["Binding"]
