# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task, TaskExistsError, TaskNotFoundError, TaskPersistenceError
from ..tasks.task_persistence import save_tasks

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
CommandHandler = Callable[[AppState, InputFn], None]

QUIT_LETTER = "q"


def _ask(read: InputFn, prompt: str) -> str:
    print(prompt)
    return read("").strip()


def _ask_completed(read: InputFn) -> bool:
    while True:
        answer = _ask(read, "Enter a 1 for done, and 0 for not done:")
        if answer == "1":
            return True
        if answer == "0":
            return False
        print("Invalid input! Please put either 1 or 0.")


def _collect_task(read: InputFn) -> Task:
    name = _ask(read, "Enter a name:")
    due_date = _ask(read, "Enter a due date:")
    notes = _ask(read, "Enter some notes:")
    return Task(name=name, is_completed=False, notes=notes, due_date=due_date)


def cmd_add(state: AppState, read: InputFn) -> None:
    task = _collect_task(read)
    try:
        state.task_store.add_task(task)
    except TaskExistsError:
        print("This task already exists!")


def cmd_delete(state: AppState, read: InputFn) -> None:
    name = _ask(read, "Enter the name of the task to delete:")
    try:
        state.task_store.delete_task(name)
    except TaskNotFoundError:
        print("The task does not exist!")


def cmd_edit(state: AppState, read: InputFn) -> None:
    """
    Re-collect every field of an existing task, then save right away.

    This is the only command that persists before quit; a failed save here
    ends the process with status 1.
    """
    name = _ask(read, "Enter the name of the task to edit:")
    if state.task_store.find_index(name) is None:
        print("The task does not exist!")
        return

    new_task = _collect_task(read)
    print("Enter if it's completed or not:")
    new_task.is_completed = _ask_completed(read)
    state.task_store.edit_task(name, new_task)

    try:
        save_tasks(state.task_store.tasks, state.tasks_path)
    except TaskPersistenceError as e:
        logger.error("Eager save after edit failed: %s", e)
        print("Error saving json file", file=sys.stderr)
        sys.exit(1)


def cmd_help(state: AppState, read: InputFn) -> None:
    print(state.commands.build_help())


def cmd_list(state: AppState, read: InputFn) -> None:
    for task in state.task_store.list_tasks():
        for line in task.display_lines():
            print(line)
        print()


HANDLERS: dict[str, CommandHandler] = {
    "a": cmd_add,
    "d": cmd_delete,
    "e": cmd_edit,
    "h": cmd_help,
    "l": cmd_list,
}


def run_console_loop(state: AppState, read: InputFn | None = None) -> None:
    """
    Read one command character per line until 'q' (or end of input).

    Only characters present in the loaded catalog are accepted; saving on quit
    is left to the caller.
    """
    if read is None:
        read = input

    logger.info(
        "Console loop started (commands=%d tasks=%d).",
        len(state.commands),
        len(state.task_store),
    )
    print("Welcome to your todo list!\nEnter 'h' if you want to list commands!")

    while True:
        try:
            line = _ask(read, "\nEnter a command (type 'h' for help):")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            print("No character entered")
            continue

        letter = line[0]
        if not state.commands.is_valid_trigger(letter):
            print("Invalid command character. Type 'h' for help.")
            continue

        if letter == QUIT_LETTER:
            print("Exiting the program. Goodbye!")
            break

        handler = HANDLERS.get(letter)
        if handler is None:
            print("Unknown command. Type 'h' to see the available commands.")
            continue

        try:
            handler(state, read)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed inside command %r, exiting.", letter)
            print()
            break

    logger.info("Console loop finished.")
