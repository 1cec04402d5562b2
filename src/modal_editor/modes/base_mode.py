"""Mode identifiers, raw input events, and the shared action context."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple, Union

from modal_editor.buffer import CursorState, TextBuffer, Viewport

if TYPE_CHECKING:  # pragma: no cover
    from modal_editor.actions import Action
    from modal_editor.keymaps.registry import KeymapRegistry


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"

    @property
    def label(self) -> str:
        return MODE_CONFIGS[self].label


@dataclass(frozen=True)
class ModeConfig:
    """Status line presentation for a mode."""

    label: str
    status_style: str


MODE_CONFIGS = {
    EditorMode.NORMAL: ModeConfig("NOR", "bold black on dark_magenta"),
    EditorMode.INSERT: ModeConfig("INS", "bold black on dark_magenta"),
}


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key press.

    ``key`` is either a named key (``ESC``, ``ENTER``, ``BACKSPACE``,
    ``LEFT``, ``RIGHT``, ``UP``, ``DOWN``) or the literal character typed.
    ``text`` carries the character when the key produces one.
    """

    key: str
    text: Optional[str] = None
    modifiers: Tuple[str, ...] = ()

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers + (self.key,))
        return self.key


@dataclass(frozen=True, slots=True)
class ResizeInput:
    """Terminal size change, in character cells."""

    width: int
    height: int


RawEvent = Union[KeyInput, ResizeInput]


@dataclass(slots=True)
class ModeResult:
    """Outcome of applying one action."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


class ModeBus:
    """Minimal event bus the engine uses to announce state changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Everything an action handler is allowed to touch."""

    buffer: TextBuffer
    cursor: CursorState
    viewport: Viewport
    bus: ModeBus = field(default_factory=ModeBus)


class Mode:
    """Key interpretation for one editor mode."""

    name: EditorMode

    def __init__(self, registry: "KeymapRegistry") -> None:
        self.registry = registry

    def map_key(self, key: KeyInput) -> Optional["Action"]:
        binding = self.registry.lookup(self.name, key.token)
        if binding is None:
            return None
        return binding.action
