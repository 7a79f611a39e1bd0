# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from .task_models import Task, TaskExistsError, TaskNotFoundError

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task list keyed by name.

    - order is insertion order (used for listing)
    - lookups are exact, case-sensitive string matches on `name`
    - failed operations raise a TaskStoreError and leave the list unchanged
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        logger.debug("TaskStore ready total=%s", len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the current list (safe to hand to the persistence layer)."""
        return list(self._tasks)

    # ---- public API ----

    def find_index(self, name: str) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.name == name:
                return index
        return None

    def add_task(self, candidate: Task) -> None:
        if self.find_index(candidate.name) is not None:
            raise TaskExistsError(candidate.name)
        self._tasks.append(candidate)
        logger.debug("Task added name=%r total=%s", candidate.name, len(self._tasks))

    def edit_task(self, name: str, new_task: Task) -> int:
        """Replace the whole record found under `name`; returns its position."""
        index = self.find_index(name)
        if index is None:
            raise TaskNotFoundError(name)
        self._tasks[index] = new_task
        logger.debug("Task edited name=%r -> %r index=%s", name, new_task.name, index)
        return index

    def delete_task(self, name: str) -> Task:
        index = self.find_index(name)
        if index is None:
            raise TaskNotFoundError(name)
        removed = self._tasks.pop(index)
        logger.debug("Task deleted name=%r total=%s", name, len(self._tasks))
        return removed

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)
