"""Glue between Textual events and the editing engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from modal_editor.engine import EditEngine, EditorView
from modal_editor.keymaps import InputMapper
from modal_editor.modes import KeyInput, ModeResult, RawEvent, ResizeInput
from modal_editor.runtime import telemetry

BUS_EVENTS = ("buffer.edit", "mode.switch", "viewport.resize", "editor.quit")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to drive the host UI."""

    update_view: Callable[[EditorView], None]
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop


class TextualEditorAdapter:
    """Feeds host events through the mapper and engine, one at a time.

    Resize events go straight to the engine's viewport; key events are
    mapped against the current mode and applied. After each event the
    host receives a fresh ``EditorView``.
    """

    def __init__(
        self,
        engine: EditEngine,
        hooks: TextualUIHooks,
        *,
        mapper: Optional[InputMapper] = None,
    ) -> None:
        self.engine = engine
        self.hooks = hooks
        self.mapper = mapper or InputMapper()
        self.logger = telemetry.get_logger("modal_editor.adapters.textual")
        self._subscribe_events()
        self._refresh_view()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        return self.handle_event(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )

    def handle_resize(self, columns: int, rows: int) -> ModeResult:
        return self.handle_event(ResizeInput(width=columns, height=rows))

    def handle_event(self, event: RawEvent) -> ModeResult:
        self._log_state("event ->", event=event)
        if isinstance(event, ResizeInput):
            self.engine.resize(event.width, event.height)
            result = ModeResult(consumed=True, status="resize")
        else:
            action = self.mapper.map(self.engine.mode, event)
            if action is None:
                result = ModeResult(consumed=False, status="ignored")
            else:
                result = self.engine.apply(action)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        self._refresh_view()
        if result.quit:
            self.hooks.request_exit()
        return result

    def _subscribe_events(self) -> None:
        for event in BUS_EVENTS:
            self.engine.bus.subscribe(
                event, lambda payload, name=event: self._handle_bus_event(name, payload)
            )

    def _handle_bus_event(self, name: str, payload: object | None) -> None:
        self._log_state("bus ->", bus_event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.engine.view())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.logger.debug(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        engine = self.engine
        return {
            "mode": engine.mode.value,
            "cursor": engine.cursor.position,
            "scroll": engine.cursor.scroll,
            "buffer": engine.buffer.name,
            "buffer_version": engine.buffer.version,
        }


__all__ = ["BUS_EVENTS", "TextualEditorAdapter", "TextualUIHooks"]
