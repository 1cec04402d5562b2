from __future__ import annotations

from typing import Sequence

import pytest

from modal_editor.actions import (
    DeleteCharBeforeCursor,
    InsertChar,
    InsertNewLineAndSplit,
    MoveDown,
    MoveRight,
    Quit,
    SwitchMode,
)
from modal_editor.buffer import BufferValidationError, CursorState, TextBuffer, Viewport
from modal_editor.engine import EditEngine
from modal_editor.keymaps import InputMapper
from modal_editor.modes import EditorMode, KeyInput, ModeResult


def make_engine(
    lines: Sequence[str],
    *,
    height: int = 10,
    cursor: CursorState | None = None,
) -> EditEngine:
    buffer = TextBuffer.load(list(lines), "scenario.txt")
    return EditEngine(buffer, viewport=Viewport(width=80, height=height), cursor=cursor)


def press(engine: EditEngine, mapper: InputMapper, *keys: str) -> list[ModeResult]:
    results = []
    for key in keys:
        text = key if len(key) == 1 else None
        action = mapper.map(engine.mode, KeyInput(key=key, text=text))
        if action is not None:
            results.append(engine.apply(action))
    return results


def test_scenario_move_down_then_insert() -> None:
    engine = make_engine(["abc", "", "de"])
    mapper = InputMapper()

    press(engine, mapper, "j", "j")
    assert engine.cursor.position == (2, 0)

    press(engine, mapper, "i", "X", "ESC")

    assert engine.buffer.get_line(2) == "Xde"
    assert engine.mode is EditorMode.NORMAL


def test_scenario_backspace_until_line_start() -> None:
    engine = make_engine(["abc"])
    mapper = InputMapper()
    press(engine, mapper, "l", "l", "l", "i")
    assert engine.cursor.col == 3

    press(engine, mapper, "BACKSPACE")
    assert engine.buffer.get_line(0) == "ab"
    assert engine.cursor.col == 2

    press(engine, mapper, "ESC", "0", "i")
    results = press(engine, mapper, "BACKSPACE", "BACKSPACE")

    assert [result.status for result in results] == ["noop", "noop"]
    assert engine.buffer.lines == ("ab",)
    assert engine.cursor.col == 0


def test_scenario_move_down_on_last_line() -> None:
    engine = make_engine(["only"])
    mapper = InputMapper()

    results = press(engine, mapper, "j")

    assert results[0].status == "noop"
    assert (engine.cursor.row, engine.cursor.scroll) == (0, 0)


def test_insert_then_delete_round_trip() -> None:
    engine = make_engine(["hello world"], cursor=CursorState(col=5, desired_col=5))

    engine.apply(InsertChar(","))
    assert engine.buffer.get_line(0) == "hello, world"
    engine.apply(DeleteCharBeforeCursor())

    assert engine.buffer.get_line(0) == "hello world"
    assert engine.cursor.col == 5


@pytest.mark.parametrize("col", [0, 1, 2, 3, 4, 5, 7])
def test_split_preserves_indentation(col: int) -> None:
    line = "    abc"
    engine = make_engine([line], cursor=CursorState(col=col, desired_col=col))

    engine.apply(InsertNewLineAndSplit())

    expected_indent = min(col, 4)
    new_line = engine.buffer.get_line(1)
    assert new_line[:expected_indent] == " " * expected_indent
    assert not new_line[expected_indent:expected_indent + 1].isspace()
    assert engine.cursor.position == (1, expected_indent)
    assert engine.cursor.desired_col == expected_indent


def test_enter_in_insert_mode_splits_line() -> None:
    engine = make_engine(["  foo bar"])
    mapper = InputMapper()
    press(engine, mapper, "l", "l", "l", "l", "l", "l", "i", "ENTER")

    assert engine.buffer.lines == ("  foo ", "  bar")
    assert engine.cursor.position == (1, 2)
    assert engine.mode is EditorMode.INSERT


def test_split_before_inner_space_keeps_it() -> None:
    engine = make_engine(["  foo bar"], cursor=CursorState(col=5, desired_col=5))

    engine.apply(InsertNewLineAndSplit())

    assert engine.buffer.lines == ("  foo", "   bar")
    assert engine.cursor.position == (1, 2)


def test_split_tab_indent_becomes_spaces() -> None:
    engine = make_engine(["\tfoo"], cursor=CursorState(col=4, desired_col=4))

    engine.apply(InsertNewLineAndSplit())

    assert engine.buffer.lines == ("\tfoo", " ")
    assert engine.cursor.position == (1, 1)


def test_open_below_enters_insert_mode() -> None:
    engine = make_engine(["  foo", "next"])
    mapper = InputMapper()

    press(engine, mapper, "o")

    assert engine.buffer.lines == ("  foo", "  ", "next")
    assert engine.cursor.position == (1, 2)
    assert engine.mode is EditorMode.INSERT


def test_split_at_viewport_bottom_scrolls() -> None:
    engine = make_engine(["a", "b"], height=2)
    engine.apply(MoveDown())

    engine.apply(InsertNewLineAndSplit(open_below=True))

    assert (engine.cursor.row, engine.cursor.scroll) == (1, 1)
    assert engine.cursor.document_row == 2
    assert engine.view().lines == ("b", "")


def test_quit_stops_engine() -> None:
    engine = make_engine(["text"])

    result = engine.apply(Quit())

    assert result.quit is True
    assert engine.running is False
    assert engine.buffer.lines == ("text",)


def test_switch_mode_round_trip() -> None:
    engine = make_engine(["text"])

    first = engine.apply(SwitchMode(EditorMode.INSERT))
    second = engine.apply(SwitchMode(EditorMode.NORMAL))

    assert first.switch_to is EditorMode.INSERT
    assert second.switch_to is EditorMode.NORMAL
    assert engine.mode is EditorMode.NORMAL


def test_engine_emits_bus_events() -> None:
    engine = make_engine(["ab"])
    events: list[tuple[str, object]] = []
    for name in ("buffer.edit", "mode.switch", "editor.quit"):
        engine.bus.subscribe(
            name, lambda payload, name=name: events.append((name, payload))
        )

    engine.apply(SwitchMode(EditorMode.INSERT))
    engine.apply(InsertChar("x"))
    engine.apply(SwitchMode(EditorMode.NORMAL))
    engine.apply(Quit())

    names = [name for name, _ in events]
    assert names == ["mode.switch", "buffer.edit", "mode.switch", "editor.quit"]
    edit_payload = events[1][1]
    assert isinstance(edit_payload, dict)
    assert edit_payload["label"] == "insert_char"
    assert edit_payload["col"] == 1


def test_view_reports_status_line_data() -> None:
    engine = make_engine(["abc", "def"], height=4)
    engine.apply(MoveRight())

    view = engine.view()

    assert view.lines == ("abc", "def", "", "")
    assert view.cursor == (0, 1)
    assert view.mode_label == "NOR"
    assert view.name == "scenario.txt"

    engine.apply(SwitchMode(EditorMode.INSERT))
    assert engine.view().mode_label == "INS"


def test_cursor_outside_document_fails_loudly() -> None:
    with pytest.raises(BufferValidationError):
        make_engine(["one"], cursor=CursorState(row=3))


def test_unknown_action_is_rejected() -> None:
    engine = make_engine(["one"])

    with pytest.raises(TypeError):
        engine.apply("MoveLeft")  # type: ignore[arg-type]
