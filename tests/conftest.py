# tests/conftest.py

from __future__ import annotations

import logging

import pytest

from taskflow.core.controller import InteractionController
from taskflow.tasks.task_store import TaskStore

from .fakes import RecordingRenderer


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def controller(store: TaskStore, renderer: RecordingRenderer) -> InteractionController:
    """
    Controller without a key source: tests drive it through handle_key().

    Use FakeKeySource + run() for loop-level tests.
    """
    return InteractionController(store, renderer)


@pytest.fixture()
def restore_root_logging():
    """Undo setup_logging(): drop and close added handlers, restore the root level."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
