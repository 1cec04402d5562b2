"""Minimal modal text editor for the terminal."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "engine",
    "keymaps",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
