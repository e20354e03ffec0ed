# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskflow.logging_setup import setup_logging

pytestmark = pytest.mark.usefixtures("restore_root_logging")


def _emit_all() -> None:
    app = logging.getLogger("taskflow.x")
    lib = logging.getLogger("prompt_toolkit")
    app.debug("app debug")
    app.info("app info")
    app.warning("app warning")
    app.error("app error")
    lib.info("lib info")
    lib.warning("lib warning")
    lib.error("lib error")


def test_console_shows_taskflow_warnings_and_only_third_party_errors(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    setup_logging(log_dir=tmp_path)
    _emit_all()

    err = capsys.readouterr().err
    assert "app warning" in err
    assert "app error" in err
    assert "app info" not in err
    assert "app debug" not in err
    assert "lib info" not in err
    assert "lib warning" not in err
    assert "lib error" in err


def test_file_handler_records_everything_from_debug(tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path)
    _emit_all()

    text = (tmp_path / "taskflow.log").read_text(encoding="utf-8")
    for message in ("app debug", "app info", "app warning", "app error", "lib info", "lib warning", "lib error"):
        assert message in text


def test_console_level_can_be_lowered(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(log_dir=tmp_path, console_level=logging.INFO)
    _emit_all()

    err = capsys.readouterr().err
    assert "app info" in err
    assert "lib info" not in err


def test_no_log_dir_means_no_file_handler(tmp_path: Path) -> None:
    setup_logging(log_dir=None)

    root = logging.getLogger()
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
    assert not list(tmp_path.iterdir())
