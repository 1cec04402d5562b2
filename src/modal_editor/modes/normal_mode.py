"""Normal mode: navigation and mode-entry commands."""

from __future__ import annotations

from .base_mode import EditorMode, Mode


class NormalMode(Mode):
    """Only bound keys mean anything here; everything else is ignored."""

    name = EditorMode.NORMAL
