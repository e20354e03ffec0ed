# src/taskflow/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Sequence

from .task_models import AddTaskResult, Task, TitleError, TitleValidation

logger = logging.getLogger(__name__)


def validate_task_title(raw_title: str) -> TitleValidation:
    """
    Validate a raw title as typed by the user.

    Checks run in order:
    - exactly empty input            -> EMPTY_TITLE
    - nothing left after strip()     -> WHITESPACE_ONLY_TITLE
    - otherwise the trimmed title is accepted
    """
    if raw_title == "":
        return TitleValidation(error=TitleError.EMPTY_TITLE)

    # str.strip() also drops the \x1c-\x1f separators; the line editor never
    # inserts them since they are not printable.
    trimmed = raw_title.strip()
    if not trimmed:
        return TitleValidation(error=TitleError.WHITESPACE_ONLY_TITLE)

    return TitleValidation(title=trimmed)


class TaskStore:
    """
    In-memory task store.

    Ids start at 1 and only move forward; a rejected title never consumes one.
    Tasks live for the duration of the process.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- public API ----

    def add_task(self, raw_title: str) -> AddTaskResult:
        validation = validate_task_title(raw_title)
        title = validation.title
        if title is None:
            logger.debug("Task rejected error=%s raw=%r", validation.error, raw_title)
            return AddTaskResult(error=validation.error)

        task = Task(id=self._next_id, title=title)
        self._tasks.append(task)
        self._next_id += 1

        logger.info("Task added id=%s total=%s", task.id, len(self._tasks))
        return AddTaskResult(task_id=task.id)

    def list_tasks(self) -> Sequence[Task]:
        """Tasks in insertion order (read-only snapshot)."""
        return tuple(self._tasks)
