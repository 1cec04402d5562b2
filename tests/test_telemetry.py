from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from modal_editor.runtime import telemetry


@pytest.fixture(autouse=True)
def restore_default_config() -> Iterator[None]:
    yield
    telemetry.configure()


@pytest.mark.parametrize("preset", ["development", "production", "DEVELOPMENT"])
def test_configure_with_preset_replaces_loggers(
    preset: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("MODAL_EDITOR_LOG_FILE", str(tmp_path / "editor.log"))
    before = telemetry.get_logger("modal_editor.tests")

    telemetry.configure(preset=preset)

    after = telemetry.get_logger("modal_editor.tests")
    assert after is not before
    assert telemetry.get_logger("modal_editor.tests") is after


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError, match="bogus"):
        telemetry.configure(preset="bogus")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=telemetry.build_config(), preset="development")
