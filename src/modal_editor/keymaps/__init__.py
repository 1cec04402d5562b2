"""Fixed key binding table and the input mapper built on it."""

from .models import Binding
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_BINDINGS, load_default_keymaps
from .mapper import InputMapper

__all__ = [
    "Binding",
    "DEFAULT_BINDINGS",
    "InputMapper",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "load_default_keymaps",
]
