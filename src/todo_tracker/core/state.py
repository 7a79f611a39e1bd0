# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..cli.commands import CommandCatalog
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (real Settings or a test double with the same attributes).
    settings: Any

    commands: CommandCatalog
    task_store: TaskStore

    @property
    def tasks_path(self) -> Path:
        return Path(self.settings.tasks_path)
