# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- loads the command catalog and the task file into AppState,
- saves the task list at the end of the run (best-effort).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import TaskPersistenceError
from ..tasks.task_persistence import load_tasks, save_tasks
from ..tasks.task_store import TaskStore
from .commands import CommandCatalogError, load_commands

logger = logging.getLogger(__name__)


class StartupError(Exception):
    """No valid state to run with (catalog or task file failed to load)."""


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    Raises StartupError when the command catalog or the task file cannot be loaded.
    """
    if settings is None:
        settings = get_settings()

    try:
        commands = load_commands(settings.commands_path)
    except CommandCatalogError as e:
        raise StartupError(f"Error loading command data: {e}") from e

    try:
        tasks = load_tasks(settings.tasks_path)
    except TaskPersistenceError as e:
        raise StartupError(f"Error loading tasks: {e}") from e

    return AppState(settings=settings, commands=commands, task_store=TaskStore(tasks))


def save_state_tasks(state: AppState) -> bool:
    """Final save on exit. Failures are reported, never raised."""
    try:
        save_tasks(state.task_store.tasks, state.tasks_path)
    except TaskPersistenceError:
        logger.exception("Failed to save tasks to %s", state.tasks_path)
        return False
    return True
