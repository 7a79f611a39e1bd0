# tests/test_console.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.cli.bootstrap import create_initial_state, save_state_tasks
from todo_tracker.connectors.console_connector import run_console_loop
from todo_tracker.tasks.task_models import Task
from todo_tracker.tasks.task_persistence import load_tasks, save_tasks

from fakes import scripted


def test_add_save_reload_scenario(tmp_path: Path) -> None:
    commands_path = tmp_path / "cmds.csv"
    commands_path.write_text("letter,name,description\na,Add,Add a task\nq,Quit,Exit\n", "utf-8")
    tasks_path = tmp_path / "todo.json"
    tasks_path.write_text("[]", "utf-8")
    settings = SimpleNamespace(commands_path=commands_path, tasks_path=tasks_path)

    state = create_initial_state(settings=settings)
    run_console_loop(state, scripted(["a", "Buy milk", "2024-01-01", "2%", "q"]))

    expected = [Task(name="Buy milk", is_completed=False, notes="2%", due_date="2024-01-01")]
    assert state.task_store.list_tasks() == expected

    assert save_state_tasks(state)
    reloaded = create_initial_state(settings=settings)
    assert reloaded.task_store.list_tasks() == expected


def test_add_same_name_twice_is_rejected(state, capsys) -> None:
    run_console_loop(state, scripted(["a", "X", "", "", "a", "X", "d2", "n2", "q"]))
    assert [t.name for t in state.task_store.list_tasks()] == ["X"]
    assert state.task_store.list_tasks()[0].due_date == ""
    assert "This task already exists!" in capsys.readouterr().out


def test_delete_missing_reports_not_found(state, capsys) -> None:
    state.task_store.add_task(Task(name="X"))
    run_console_loop(state, scripted(["d", "Y", "q"]))
    assert [t.name for t in state.task_store.list_tasks()] == ["X"]
    assert "The task does not exist!" in capsys.readouterr().out


def test_delete_existing(state) -> None:
    for name in ("a", "b", "c"):
        state.task_store.add_task(Task(name=name))
    run_console_loop(state, scripted(["d", "b", "q"]))
    assert [t.name for t in state.task_store.list_tasks()] == ["a", "c"]


def test_edit_retries_completion_and_saves_immediately(state, capsys) -> None:
    state.task_store.add_task(Task(name="a"))
    state.task_store.add_task(Task(name="b", notes="old"))
    run_console_loop(state, scripted(["e", "b", "b", "friday", "new", "maybe", "", "1"]))

    expected = [Task(name="a"), Task(name="b", is_completed=True, notes="new", due_date="friday")]
    assert state.task_store.list_tasks() == expected
    # persisted by the edit itself, without a quit
    assert load_tasks(state.tasks_path) == expected
    out = capsys.readouterr().out
    assert out.count("Invalid input! Please put either 1 or 0.") == 2


def test_edit_missing_does_not_save(state, capsys) -> None:
    save_tasks([Task(name="on-disk")], state.tasks_path)
    run_console_loop(state, scripted(["e", "ghost", "q"]))
    assert "The task does not exist!" in capsys.readouterr().out
    assert [t.name for t in load_tasks(state.tasks_path)] == ["on-disk"]


def test_edit_save_failure_exits_nonzero(state, tmp_path: Path) -> None:
    state.task_store.add_task(Task(name="a"))
    blocker = tmp_path / "blocker"
    blocker.write_text("x", "utf-8")
    state.settings.tasks_path = blocker / "todo.json"

    with pytest.raises(SystemExit) as exc:
        run_console_loop(state, scripted(["e", "a", "a", "", "", "0"]))
    assert exc.value.code == 1


def test_list_and_help_output(state, capsys) -> None:
    state.task_store.add_task(Task(name="Buy milk", notes="2%", due_date="2024-01-01"))
    state.task_store.add_task(Task(name="Done thing", is_completed=True))
    run_console_loop(state, scripted(["l", "h", "q"]))
    out = capsys.readouterr().out
    assert "name: Buy milk\ndue_date: 2024-01-01\ncompleted: no\nnotes: 2%\n" in out
    assert "name: Done thing\ndue_date: \ncompleted: yes\nnotes: \n" in out
    assert "Command a: Add        - Add a task" in out
    assert "Command q: Quit       - Exit" in out


def test_invalid_and_empty_input_reprompt(state, capsys) -> None:
    run_console_loop(state, scripted(["", "x", "zebra", "q"]))
    out = capsys.readouterr().out
    assert "No character entered" in out
    assert "Invalid command character. Type 'h' for help." in out
    assert "Exiting the program. Goodbye!" in out


def test_first_character_selects_command(state) -> None:
    run_console_loop(state, scripted(["  add please", "t", "", "", "q"]))
    assert [t.name for t in state.task_store.list_tasks()] == ["t"]


def test_catalog_letter_without_handler(tmp_path: Path, capsys) -> None:
    commands_path = tmp_path / "cmds.csv"
    commands_path.write_text("letter,name,description\nz,Zap,Nothing\nq,Quit,Exit\n", "utf-8")
    tasks_path = tmp_path / "todo.json"
    tasks_path.write_text("[]", "utf-8")
    state = create_initial_state(
        settings=SimpleNamespace(commands_path=commands_path, tasks_path=tasks_path)
    )
    run_console_loop(state, scripted(["z", "q"]))
    assert "Unknown command. Type 'h' to see the available commands." in capsys.readouterr().out


def test_quit_requires_catalog_entry(tmp_path: Path, capsys) -> None:
    commands_path = tmp_path / "cmds.csv"
    commands_path.write_text("letter,name,description\na,Add,Add\n", "utf-8")
    tasks_path = tmp_path / "todo.json"
    tasks_path.write_text("[]", "utf-8")
    state = create_initial_state(
        settings=SimpleNamespace(commands_path=commands_path, tasks_path=tasks_path)
    )
    # 'q' is not in this catalog; the loop only ends at end of input
    run_console_loop(state, scripted(["q"]))
    out = capsys.readouterr().out
    assert "Invalid command character" in out
    assert "Goodbye" not in out


def test_eof_inside_command_ends_loop(state) -> None:
    run_console_loop(state, scripted(["a", "half"]))
    assert state.task_store.list_tasks() == []


def test_add_and_delete_are_not_saved_before_quit(state) -> None:
    save_tasks([Task(name="keep"), Task(name="gone")], state.tasks_path)
    state.task_store.add_task(Task(name="keep"))
    state.task_store.add_task(Task(name="gone"))

    # no 'q': the loop ends at end of input, and nothing here saves
    run_console_loop(state, scripted(["a", "fresh", "", "", "d", "gone"]))

    assert [t.name for t in state.task_store.list_tasks()] == ["keep", "fresh"]
    assert [t.name for t in load_tasks(state.tasks_path)] == ["keep", "gone"]
