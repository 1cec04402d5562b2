from __future__ import annotations

from pathlib import Path

import pytest

from modal_editor.adapters.textual import app as app_module


def test_missing_path_argument_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as info:
        app_module.main([])

    assert info.value.code == 2
    assert "path" in capsys.readouterr().err


def test_unreadable_file_exits_before_terminal_setup(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    started: list[bool] = []
    monkeypatch.setattr(
        app_module.ModalEditorApp, "run", lambda self: started.append(True)
    )
    missing = tmp_path / "nope.txt"

    with pytest.raises(SystemExit) as info:
        app_module.main([str(missing)])

    assert info.value.code == 1
    err = capsys.readouterr().err
    assert "cannot open" in err
    assert str(missing) in err
    assert started == []


def test_main_runs_app_with_loaded_buffer(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    seen: list[tuple[str, ...]] = []
    monkeypatch.setattr(
        app_module.ModalEditorApp,
        "run",
        lambda self: seen.append(tuple(self.engine.buffer.lines)),
    )

    assert app_module.main([str(path), "--log-level", "debug"]) == 0
    assert seen == [("first", "second")]
