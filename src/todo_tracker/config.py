# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Real environment variables always win over values from .env.
- No command-line flags: everything is configured through TODO_* variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_TASKS_PATH = Path("src/todo.json")
DEFAULT_COMMANDS_PATH = Path("src/ToDoCommands.csv")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local paths ----
    data_dir: Path
    tasks_path: Path
    commands_path: Path

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "todo") or "todo",
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/todo")),
            tasks_path=_env_path(_k("TASKS_PATH"), DEFAULT_TASKS_PATH),
            commands_path=_env_path(_k("COMMANDS_PATH"), DEFAULT_COMMANDS_PATH),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
