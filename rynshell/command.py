"""Command expression tree and process launching."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass, field
from typing import IO, Any, Sequence as Seq, Union

_WINDOWS_BUILTINS = frozenset({"echo", "dir", "cd", "cls", "set", "pause", "type"})

_Stream = Union[None, int, IO[Any]]


@dataclass
class Command:
    """A single command with its arguments."""

    args: list[str] = field(default_factory=list)


@dataclass
class Pipeline:
    """Commands joined by ``|``."""

    commands: list[Expr] = field(default_factory=list)


@dataclass
class Sequence:
    """Expressions joined by ``;``."""

    exprs: list[Expr] = field(default_factory=list)


@dataclass
class And:
    """``lhs && rhs``."""

    lhs: Expr
    rhs: Expr


@dataclass
class Or:
    """``lhs || rhs``."""

    lhs: Expr
    rhs: Expr


Expr = Union[Command, Pipeline, Sequence, And, Or]


def _argv(args: Seq[str]) -> list[str]:
    command, *rest = args
    if os.name == "nt" and command in _WINDOWS_BUILTINS:
        return ["cmd", "/C", command, *rest]
    return [command, *rest]


def execute_command(args: Seq[str]) -> bool:
    """Run a command to completion; return True if it exited successfully."""
    if not args:
        return False
    try:
        completed = subprocess.run(_argv(args))
    except OSError as err:
        print(f"error executing command: {err}", file=sys.stderr)
        return False
    return completed.returncode == 0


def spawn_command(
    args: Seq[str],
    stdin: _Stream,
    stdout: _Stream,
    stderr: _Stream,
) -> subprocess.Popen:
    """Start a command without waiting for it; ``None`` streams are inherited."""
    if not args:
        print("error: Attempted to spawn an empty command.", file=sys.stderr)
        raise ValueError("Empty command")
    return subprocess.Popen(_argv(args), stdin=stdin, stdout=stdout, stderr=stderr)