"""Commands handled by the shell itself."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Sequence


def _home() -> str:
    try:
        return str(Path.home())
    except RuntimeError:
        return "/"


def handle_builtin(args: Sequence[str]) -> bool | None:
    """Handle a builtin command.

    Returns True when the shell should exit, False when a builtin ran, and
    None when the command is not a builtin.
    """
    if not args:
        return None
    name = args[0]
    if name == "exit":
        return True
    if name == "cd":
        new_dir = args[1] if len(args) > 1 else _home()
        try:
            os.chdir(new_dir)
        except OSError as err:
            print(f"cd: {new_dir}: {err.strerror or err}", file=sys.stderr)
        return False
    return None