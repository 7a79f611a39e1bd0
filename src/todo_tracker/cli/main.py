# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the command catalog and the task file,
runs the console loop, then saves the task list once on the way out.
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from .bootstrap import StartupError, create_initial_state, save_state_tasks

logger = logging.getLogger(__name__)


def main(*, settings=None) -> int:
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if getattr(settings, "log_to_file", False) else None
    setup_logging(console_level=console_level, log_dir=log_dir)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo"))

    try:
        state = create_initial_state(settings=settings)
    except StartupError as e:
        logger.debug("Startup failed.", exc_info=True)
        print(e, file=sys.stderr)
        return 1

    run_console_loop(state)

    # Best-effort: a failed final save does not change the exit status.
    if save_state_tasks(state):
        print("Tasks saved successfully.")
    else:
        print("Error saving tasks to JSON.", file=sys.stderr)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
