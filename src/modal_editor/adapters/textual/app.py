"""Textual application hosting the editor, and the command line entry point."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence, Tuple

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from modal_editor.buffer import BufferLoadError, TextBuffer
from modal_editor.engine import EditEngine, EditorView
from modal_editor.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks
from .render import render_buffer, render_status

# Textual key names -> engine key tokens.
SPECIAL_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
}

NormalizedKey = Tuple[str, Optional[str], Tuple[str, ...]]


class ModalEditorApp(App[None]):
    """Full-screen editor: buffer window on top, status line at the bottom.

    Textual owns the terminal: it switches to the alternate screen and raw
    mode in ``run`` and restores both on every exit path.
    """

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
	}

	#status-line {
		height: 1;
	}
	"""

    def __init__(self, buffer: TextBuffer) -> None:
        super().__init__()
        self.engine = EditEngine(buffer)
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("modal_editor.app")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            request_exit=self.exit,
        )
        self.adapter = TextualEditorAdapter(self.engine, hooks)
        self.adapter.handle_resize(self.size.width, self.size.height)
        self.logger.info(f"opened {self.engine.buffer.name}")

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.handle_resize(event.size.width, event.size.height)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self.normalize_key(event.key, event.character)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        event.prevent_default()

    def _update_view(self, view: EditorView) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_buffer(view))
        if self._status_widget:
            self._status_widget.update(render_status(view))

    @staticmethod
    def normalize_key(key: str, character: Optional[str]) -> Optional[NormalizedKey]:
        """Turn a Textual key name into ``(token, text, modifiers)``.

        Printable characters use the character itself as the token, so
        ``colon`` becomes ``":"``. Returns ``None`` for keys the engine has
        no vocabulary for.
        """

        *prefix, base = key.split("+")
        modifiers = tuple(part.upper() for part in prefix)
        if base in SPECIAL_KEYS:
            return (SPECIAL_KEYS[base], None, modifiers)
        if modifiers and modifiers != ("SHIFT",):
            return (base, None, modifiers)
        if character and len(character) == 1 and character.isprintable():
            return (character, character, ())
        return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modal-editor", description="Minimal modal text editor."
    )
    parser.add_argument("path", help="File to open")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("MODAL_EDITOR_LOG_LEVEL", "INFO"),
        help="Minimum telemetry level (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("MODAL_EDITOR_LOG_FILE"),
        help="Write telemetry to this file (default: no log file)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    telemetry.configure(
        config=telemetry.build_config(level=args.log_level, log_file=args.log_file)
    )
    try:
        buffer = TextBuffer.from_file(args.path)
    except BufferLoadError as exc:
        telemetry.record_event("startup.failed", level="error", data={"path": exc.name})
        parser.exit(1, f"{parser.prog}: {exc}\n")

    ModalEditorApp(buffer).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())
