# src/todo_tracker/tasks/task_persistence.py

"""
JSON persistence for the task list.

File shape: a top-level array of objects, each with exactly the keys
name / is_completed / notes / due_date (written in that order, pretty-printed).
Loading is strict: any shape mismatch fails the whole load.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .task_models import TASK_FIELDS, Task, TaskFileError, TaskFormatError

logger = logging.getLogger(__name__)


def _task_from_obj(obj: Any, index: int, path: Path) -> Task:
    if not isinstance(obj, dict):
        raise TaskFormatError(path, f"item {index} is not an object")

    keys = set(obj)
    missing = [k for k in TASK_FIELDS if k not in keys]
    extra = sorted(keys - set(TASK_FIELDS))
    if missing:
        raise TaskFormatError(path, f"item {index} is missing field(s): {', '.join(missing)}")
    if extra:
        raise TaskFormatError(path, f"item {index} has unknown field(s): {', '.join(extra)}")

    if not isinstance(obj["is_completed"], bool):
        raise TaskFormatError(path, f"item {index}: is_completed must be a boolean")
    for key in ("name", "notes", "due_date"):
        if not isinstance(obj[key], str):
            raise TaskFormatError(path, f"item {index}: {key} must be a string")

    return Task(
        name=obj["name"],
        is_completed=obj["is_completed"],
        notes=obj["notes"],
        due_date=obj["due_date"],
    )


def load_tasks(path: str | Path) -> list[Task]:
    path = Path(path)
    try:
        raw = path.read_text("utf-8")
    except OSError as e:
        raise TaskFileError(path, f"cannot read task file: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise TaskFormatError(path, f"task file is not valid UTF-8: {e.reason}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TaskFormatError(path, f"invalid JSON: {e.msg} at line {e.lineno}") from e
    except RecursionError as e:
        raise TaskFormatError(path, "invalid JSON: nesting too deep") from e

    if not isinstance(data, list):
        raise TaskFormatError(path, "top-level value must be an array")

    tasks = [_task_from_obj(obj, i, path) for i, obj in enumerate(data)]
    logger.info("Loaded %d task(s) from %s", len(tasks), path)
    return tasks


def save_tasks(tasks: Iterable[Task], path: str | Path) -> None:
    path = Path(path)
    items = [t.to_dict() for t in tasks]
    try:
        payload = json.dumps(items, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        raise TaskFormatError(path, f"cannot encode tasks: {e}") from e

    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(payload, "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise TaskFileError(path, f"cannot write task file: {e.strerror or e}") from e
    logger.info("Saved %d task(s) to %s", len(items), path)
