# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Field order of a task object on disk.
TASK_FIELDS: tuple[str, ...] = ("name", "is_completed", "notes", "due_date")


@dataclass(slots=True)
class Task:
    """
    One to-do item.

    Notes:
    - `name` is the lookup key; uniqueness is checked only when adding.
    - `due_date` is free text, never parsed.
    """

    name: str
    is_completed: bool = False
    notes: str = ""
    due_date: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "is_completed": self.is_completed,
            "notes": self.notes,
            "due_date": self.due_date,
        }

    def display_lines(self) -> list[str]:
        return [
            f"name: {self.name}",
            f"due_date: {self.due_date}",
            f"completed: {'yes' if self.is_completed else 'no'}",
            f"notes: {self.notes}",
        ]


class TaskStoreError(Exception):
    """Recoverable lookup/insert failure; the store is left unchanged."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class TaskExistsError(TaskStoreError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"task already exists: {name!r}")


class TaskNotFoundError(TaskStoreError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"task does not exist: {name!r}")


class TaskPersistenceError(Exception):
    """Base for failures while reading or writing the task file."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"{message} ({path})")
        self.path = Path(path)


class TaskFileError(TaskPersistenceError):
    """The task file could not be read or written."""


class TaskFormatError(TaskPersistenceError):
    """The task file content is not a JSON array of task objects."""
