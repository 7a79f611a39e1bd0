# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.cli.bootstrap import create_initial_state
from todo_tracker.core.state import AppState

COMMANDS_CSV = (
    "letter,name,description\n"
    "a,Add,Add a task\n"
    "d,Delete,Delete a task\n"
    "e,Edit,Edit a task\n"
    "h,Help,Show commands\n"
    "l,List,List tasks\n"
    "q,Quit,Exit\n"
)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and main.

    A SimpleNamespace keeps tests independent of TODO_* environment variables.
    """
    commands_path = tmp_path / "ToDoCommands.csv"
    commands_path.write_text(COMMANDS_CSV, "utf-8")
    tasks_path = tmp_path / "todo.json"
    tasks_path.write_text("[]", "utf-8")
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tasks_path,
        commands_path=commands_path,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)

