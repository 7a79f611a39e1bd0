# src/todo_tracker/cli/commands.py

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandCatalogError(Exception):
    """The command CSV is missing or malformed."""


@dataclass(frozen=True, slots=True)
class CommandEntry:
    letter: str
    name: str
    description: str


class CommandCatalog:
    """Read-only table of menu entries, keyed by trigger character."""

    def __init__(self, entries: list[CommandEntry]) -> None:
        self._entries: tuple[CommandEntry, ...] = tuple(entries)
        self._by_letter: dict[str, CommandEntry] = {}
        for entry in self._entries:
            # first row wins when a letter repeats
            self._by_letter.setdefault(entry.letter, entry)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[CommandEntry, ...]:
        return self._entries

    def get(self, letter: str) -> CommandEntry | None:
        return self._by_letter.get(letter)

    def is_valid_trigger(self, char: str) -> bool:
        return char in self._by_letter

    def build_help(self) -> str:
        return "\n".join(
            f"Command {e.letter}: {e.name:<10} - {e.description}" for e in self.entries
        )


def load_commands(path: str | Path) -> CommandCatalog:
    """
    Load `letter,name,description` rows (after a header row) from a CSV file.

    Every row must have exactly three fields and a one-character letter;
    otherwise the whole load fails.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
    except OSError as e:
        raise CommandCatalogError(f"cannot read command file {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise CommandCatalogError(f"command file {path} is not valid UTF-8: {e.reason}") from e
    except csv.Error as e:
        raise CommandCatalogError(f"malformed command file {path}: {e}") from e

    if not rows:
        raise CommandCatalogError(f"command file {path} has no header row")

    entries: list[CommandEntry] = []
    # line 1 is the header
    for lineno, row in enumerate(rows[1:], start=2):
        if not row:
            continue
        if len(row) != 3:
            raise CommandCatalogError(
                f"{path}:{lineno}: expected 3 fields (letter,name,description), got {len(row)}"
            )
        letter, name, description = row
        if len(letter) != 1:
            raise CommandCatalogError(
                f"{path}:{lineno}: trigger must be exactly one character, got {letter!r}"
            )
        entries.append(CommandEntry(letter=letter, name=name, description=description))

    logger.info("Loaded %d command(s) from %s", len(entries), path)
    return CommandCatalog(entries)
