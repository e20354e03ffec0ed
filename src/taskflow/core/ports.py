# src/taskflow/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on Protocols instead of concrete implementations.
This keeps the terminal adapters swappable and makes testing easier.
"""

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Protocol

from ..tasks.task_models import AddTaskResult, Task, TitleError
from .keys import KeyEvent


class KeySource(Protocol):
    """Blocking source of key events from a terminal."""

    def raw_mode(self) -> AbstractContextManager[None]: ...

    def read_key(self) -> KeyEvent: ...

    def close(self) -> None: ...


class TaskRepo(Protocol):
    def add_task(self, raw_title: str) -> AddTaskResult: ...
    def list_tasks(self) -> Sequence[Task]: ...


class Renderer(Protocol):
    """
    Everything the user sees.

    The controller only says *what* to show; colors, icons and cursor movement
    are the renderer's business.
    """

    def clear_screen(self) -> None: ...
    def show_banner(self) -> None: ...
    def show_menu(self, entries: Sequence[tuple[str, str]]) -> None: ...
    def command_prompt(self, keys: Sequence[str]) -> None: ...
    def echo_command(self, key: str) -> None: ...
    def invalid_command(self, keys: Sequence[str]) -> None: ...

    def title_prompt(self) -> None: ...
    def echo_char(self, char: str) -> None: ...
    def erase_char(self) -> None: ...
    def task_added(self, task_id: int) -> None: ...
    def task_rejected(self, error: TitleError) -> None: ...
    def task_cancelled(self) -> None: ...

    def show_tasks(self, tasks: Sequence[Task]) -> None: ...
    def goodbye(self) -> None: ...
