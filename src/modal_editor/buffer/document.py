"""Line-oriented text storage for the editor."""

from __future__ import annotations

import os
from itertools import takewhile
from typing import Iterable, List, Sequence, Union

from .validation import BufferValidationError, ensure_cursor, ensure_row


class BufferLoadError(RuntimeError):
    """Raised when a buffer's source cannot be read."""

    def __init__(self, message: str, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class TextBuffer:
    """Ordered list of lines plus the name of the source they came from.

    Positions are character indices, not display columns. The buffer is
    never empty: loading nothing yields a single empty line.
    """

    def __init__(self, lines: Iterable[str] = (), *, name: str = "") -> None:
        self._lines: List[str] = list(lines) or [""]
        self._name = name
        self.version = 0

    @classmethod
    def load(cls, source: Iterable[str], name: str) -> "TextBuffer":
        """Build a buffer from ``source``, one element per line."""

        try:
            lines = [line.rstrip("\r\n") for line in source]
        except OSError as exc:
            raise BufferLoadError(f"cannot read {name}: {exc}", name=name) from exc
        return cls(lines, name=name)

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike[str]]) -> "TextBuffer":
        """Read a UTF-8 file, splitting on line feeds.

        A trailing line feed terminates the last line instead of starting a
        new empty one, and a ``\\r`` before each line feed is dropped.
        """

        name = os.fspath(path)
        try:
            with open(name, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else exc
            raise BufferLoadError(f"cannot open {name}: {reason}", name=name) from exc

        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        return cls.load(lines, name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def lines(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, row: int) -> str:
        return self._lines[ensure_row(self._lines, row)]

    def line_len(self, row: int) -> int:
        return len(self.get_line(row))

    def insert_char(self, row: int, col: int, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"insert_char expects one character, got {ch!r}")
        ensure_cursor(self._lines, (row, col))
        line = self._lines[row]
        self._lines[row] = line[:col] + ch + line[col:]
        self.version += 1

    def delete_char_before(self, row: int, col: int) -> bool:
        """Remove the character left of ``col``.

        Column 0 is a no-op: lines are never joined.
        """

        ensure_cursor(self._lines, (row, col))
        if col == 0:
            return False
        line = self._lines[row]
        self._lines[row] = line[: col - 1] + line[col:]
        self.version += 1
        return True

    def split_line(self, row: int, col: int) -> int:
        """Break ``row`` at ``col`` and return the new line's indent length.

        The new line starts with one space per character of the leading
        whitespace of ``row``, capped at ``col``. A split inside that run
        moves the text from the first non-whitespace character onward;
        otherwise the tail is everything after ``col``, whitespace included.
        """

        ensure_cursor(self._lines, (row, col))
        line = self._lines[row]
        run = sum(1 for _ in takewhile(str.isspace, line))
        indent = " " * min(col, run)
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, indent + line[max(col, run) :])
        self.version += 1
        return len(indent)


__all__ = ["BufferLoadError", "BufferValidationError", "TextBuffer"]
