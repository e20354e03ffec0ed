# tests/test_main.py

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from taskflow.cli import main as cli_main
from taskflow.config import Settings
from taskflow.core.controller import InteractionController
from taskflow.tasks.task_store import TaskStore

from .fakes import FakeKeySource, RecordingRenderer, keys

pytestmark = pytest.mark.usefixtures("restore_root_logging")


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return replace(
        Settings.from_env(),
        data_dir=tmp_path / "data",
        log_level="WARNING",
        log_to_file=True,
        show_banner=True,
        clear_screen=True,
    )


def _patch(monkeypatch: pytest.MonkeyPatch, settings: Settings, source: FakeKeySource) -> RecordingRenderer:
    renderer = RecordingRenderer()
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(
        cli_main,
        "create_controller",
        lambda *, settings: InteractionController(TaskStore(), renderer, source),
    )
    return renderer


def test_main_quit_exits_zero(monkeypatch: pytest.MonkeyPatch, settings: Settings) -> None:
    source = FakeKeySource(keys("q"))
    renderer = _patch(monkeypatch, settings, source)

    assert cli_main.main() == 0
    assert renderer.names()[:2] == ["clear_screen", "show_banner"]
    assert renderer.names()[-1] == "goodbye"
    assert source.closed
    assert (settings.data_dir / "taskflow.log").exists()


def test_main_terminal_failure_exits_one(monkeypatch: pytest.MonkeyPatch, settings: Settings) -> None:
    source = FakeKeySource(keys("a", "Buy"), exhausted_error=OSError("read failed"))
    _patch(monkeypatch, settings, source)

    assert cli_main.main() == 1
    assert not source.in_raw_mode
    assert source.closed


def test_main_closed_input_exits_one(monkeypatch: pytest.MonkeyPatch, settings: Settings) -> None:
    source = FakeKeySource([])
    _patch(monkeypatch, settings, source)

    assert cli_main.main() == 1
    assert source.closed


def test_banner_can_be_disabled(monkeypatch: pytest.MonkeyPatch, settings: Settings) -> None:
    renderer = _patch(monkeypatch, replace(settings, show_banner=False), FakeKeySource(keys("q")))

    assert cli_main.main() == 0
    assert "show_banner" not in renderer.names()


def test_clear_screen_can_be_disabled(monkeypatch: pytest.MonkeyPatch, settings: Settings) -> None:
    renderer = _patch(monkeypatch, replace(settings, clear_screen=False), FakeKeySource(keys("q")))

    assert cli_main.main() == 0
    assert "clear_screen" not in renderer.names()
    assert renderer.names()[0] == "show_banner"
