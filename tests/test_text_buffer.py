from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from modal_editor.buffer import BufferLoadError, BufferValidationError, TextBuffer


def make_buffer(*lines: str) -> TextBuffer:
    return TextBuffer.load(list(lines), "sample.txt")


def test_load_without_lines_yields_single_empty_line() -> None:
    buffer = TextBuffer.load([], "empty.txt")

    assert buffer.lines == ("",)
    assert buffer.name == "empty.txt"


def test_load_strips_line_terminators() -> None:
    buffer = TextBuffer.load(["abc\n", "de\r\n", "f"], "mixed.txt")

    assert buffer.lines == ("abc", "de", "f")


def test_load_wraps_read_errors() -> None:
    def failing_source() -> Iterator[str]:
        yield "first"
        raise OSError("disk went away")

    with pytest.raises(BufferLoadError) as info:
        TextBuffer.load(failing_source(), "broken.txt")

    assert info.value.name == "broken.txt"
    assert isinstance(info.value.__cause__, OSError)


def test_from_file_splits_on_line_feeds(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"abc\n\nde\n")

    buffer = TextBuffer.from_file(path)

    assert buffer.lines == ("abc", "", "de")
    assert buffer.name == str(path)


def test_from_file_without_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"abc\nde")

    assert TextBuffer.from_file(path).lines == ("abc", "de")


def test_from_file_drops_carriage_returns(tmp_path: Path) -> None:
    path = tmp_path / "dos.txt"
    path.write_bytes(b"one\r\ntwo\r\n")

    assert TextBuffer.from_file(path).lines == ("one", "two")


def test_from_file_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")

    assert TextBuffer.from_file(path).lines == ("",)


def test_from_file_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "missing.txt"

    with pytest.raises(BufferLoadError) as info:
        TextBuffer.from_file(path)

    assert "cannot open" in str(info.value)
    assert str(path) in str(info.value)


def test_from_file_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(BufferLoadError):
        TextBuffer.from_file(path)


def test_name_is_read_only() -> None:
    buffer = make_buffer("abc")

    with pytest.raises(AttributeError):
        buffer.name = "other.txt"  # type: ignore[misc]


def test_line_len_out_of_range() -> None:
    buffer = make_buffer("abc")

    assert buffer.line_len(0) == 3
    with pytest.raises(BufferValidationError):
        buffer.line_len(1)
    with pytest.raises(BufferValidationError):
        buffer.line_len(-1)


def test_insert_char_positions() -> None:
    buffer = make_buffer("ac")

    buffer.insert_char(0, 1, "b")
    buffer.insert_char(0, 3, "d")
    buffer.insert_char(0, 0, ">")

    assert buffer.get_line(0) == ">abcd"
    assert buffer.version == 3


def test_insert_char_past_line_end_is_rejected() -> None:
    buffer = make_buffer("ab")

    with pytest.raises(BufferValidationError) as info:
        buffer.insert_char(0, 3, "x")

    assert info.value.cursor == (0, 3)
    assert buffer.get_line(0) == "ab"


def test_insert_char_requires_single_character() -> None:
    buffer = make_buffer("ab")

    with pytest.raises(ValueError):
        buffer.insert_char(0, 0, "xy")


def test_delete_char_before_cursor() -> None:
    buffer = make_buffer("abc")

    assert buffer.delete_char_before(0, 2) is True
    assert buffer.get_line(0) == "ac"


def test_delete_at_column_zero_is_noop() -> None:
    buffer = make_buffer("first", "second")

    assert buffer.delete_char_before(1, 0) is False
    assert buffer.lines == ("first", "second")
    assert buffer.version == 0


def test_split_line_inside_text_carries_indent() -> None:
    buffer = make_buffer("    foo bar")

    indent = buffer.split_line(0, 8)

    assert indent == 4
    assert buffer.lines == ("    foo ", "    bar")


def test_split_line_keeps_whitespace_after_indent() -> None:
    buffer = make_buffer("foo bar")

    indent = buffer.split_line(0, 3)

    assert indent == 0
    assert buffer.lines == ("foo", " bar")
    assert "".join(buffer.lines) == "foo bar"


def test_split_line_inside_indent_caps_at_column() -> None:
    buffer = make_buffer("    abc")

    indent = buffer.split_line(0, 2)

    assert indent == 2
    assert buffer.lines == ("  ", "  abc")


def test_split_line_indents_with_spaces() -> None:
    buffer = make_buffer("\tif x:", "next")

    indent = buffer.split_line(0, 6)

    assert indent == 1
    assert buffer.lines == ("\tif x:", " ", "next")


def test_split_line_replaces_tab_run_with_spaces() -> None:
    buffer = make_buffer("\t\tfoo")

    indent = buffer.split_line(0, 1)

    assert indent == 1
    assert buffer.lines == ("\t", " foo")


def test_split_line_at_column_zero() -> None:
    buffer = make_buffer("abc")

    assert buffer.split_line(0, 0) == 0
    assert buffer.lines == ("", "abc")
