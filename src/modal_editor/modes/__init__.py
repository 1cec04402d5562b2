"""Editor modes, raw input events, and the mode state machine."""

from .base_mode import (
    MODE_CONFIGS,
    EditorMode,
    KeyInput,
    Mode,
    ModeBus,
    ModeConfig,
    ModeContext,
    ModeResult,
    RawEvent,
    ResizeInput,
)
from .insert_mode import InsertMode
from .mode_manager import TRANSITIONS, ModeManager, ModeTransitionError
from .normal_mode import NormalMode

__all__ = [
    "EditorMode",
    "InsertMode",
    "KeyInput",
    "MODE_CONFIGS",
    "Mode",
    "ModeBus",
    "ModeConfig",
    "ModeContext",
    "ModeManager",
    "ModeResult",
    "ModeTransitionError",
    "NormalMode",
    "RawEvent",
    "ResizeInput",
    "TRANSITIONS",
]
