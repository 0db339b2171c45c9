"""Location and loading of the command history file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import platformdirs
from prompt_toolkit.history import FileHistory


@dataclass(frozen=True)
class HistorySetup:
    """Where the history file lives."""

    path: Path


def setup_history(data_dir: str | Path | None = None) -> HistorySetup:
    """Create the shell's data directory and return the history location."""
    base = Path(data_dir) if data_dir is not None else platformdirs.user_data_path()
    directory = base / "ryn"
    directory.mkdir(parents=True, exist_ok=True)
    return HistorySetup(path=directory / "history.txt")


def load_history(history: HistorySetup) -> FileHistory:
    """Make sure the history file exists and open it; entries persist as added."""
    with open(history.path, "a", encoding="utf-8"):
        pass
    return FileHistory(str(history.path))