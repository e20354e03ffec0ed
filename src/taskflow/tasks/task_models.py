# src/taskflow/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TitleError(StrEnum):
    """
    Validation errors for task titles.

    The value is the user-facing message shown by the renderer.
    """

    EMPTY_TITLE = "Task title cannot be empty"
    WHITESPACE_ONLY_TITLE = "Task title cannot contain only whitespace"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str


@dataclass(frozen=True, slots=True)
class TitleValidation:
    """Either a trimmed title or an error, never both."""

    title: str | None = None
    error: TitleError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class AddTaskResult:
    task_id: int | None = None
    error: TitleError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
