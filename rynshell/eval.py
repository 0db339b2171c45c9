"""Evaluation of parsed command expressions."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from typing import IO, Any, Mapping

from rynshell.builtin import handle_builtin
from rynshell.command import (
    And,
    Command,
    Expr,
    Or,
    Pipeline,
    Sequence,
    execute_command,
    spawn_command,
)
from rynshell.parser import ParseError, parse_expr, tokenize


@dataclass(frozen=True)
class EvalResult:
    """Outcome of evaluating an expression."""

    success: bool
    should_exit: bool


_FAILED = EvalResult(success=False, should_exit=False)


def _expand_alias(args: list[str], aliases: Mapping[str, str]) -> list[str] | Expr:
    """Replace the command word by its alias.

    Returns the expanded argument list, or a whole expression when the alias
    is more than a simple command.
    """
    alias = aliases.get(args[0]) if args else None
    if alias is None:
        return args
    try:
        tokens = tokenize(alias)
    except ParseError:
        tokens = []
    try:
        parsed = parse_expr(tokens)
    except ParseError:
        return args
    if isinstance(parsed, Command):
        return [*parsed.args, *args[1:]]
    return parsed


def _eval_command(command: Command, aliases: Mapping[str, str]) -> EvalResult:
    expanded = _expand_alias(list(command.args), aliases)
    if not isinstance(expanded, list):
        return eval_expr(expanded, aliases)
    builtin = handle_builtin(expanded)
    if builtin is not None:
        return EvalResult(success=True, should_exit=builtin)
    return EvalResult(success=execute_command(expanded), should_exit=False)


def _eval_sequence(exprs: list[Expr], aliases: Mapping[str, str]) -> EvalResult:
    success = True
    for expr in exprs:
        result = eval_expr(expr, aliases)
        if not result.success:
            success = False
        if result.should_exit:
            return EvalResult(success=result.success, should_exit=True)
    return EvalResult(success=success, should_exit=False)


def _eval_pipeline(commands: list[Expr], aliases: Mapping[str, str]) -> EvalResult:
    processes: list[subprocess.Popen] = []
    previous: IO[Any] | None = None
    last = len(commands) - 1
    try:
        for index, expr in enumerate(commands):
            if not isinstance(expr, Command):
                return _FAILED
            expanded = _expand_alias(list(expr.args), aliases)
            if not isinstance(expanded, list):
                return eval_expr(expanded, aliases)
            stdout = subprocess.PIPE if index < last else None
            stdin, previous = previous, None
            try:
                process = spawn_command(expanded, stdin, stdout, None)
            except (OSError, ValueError) as err:
                name = expanded[0] if expanded else ""
                print(f"Failed to spawn command '{name}': {err}", file=sys.stderr)
                return _FAILED
            finally:
                if stdin is not None:
                    stdin.close()
            processes.append(process)
            if stdout is not None:
                previous = process.stdout
    finally:
        if previous is not None:
            previous.close()

    statuses = [process.wait() for process in processes]
    return EvalResult(success=all(code == 0 for code in statuses), should_exit=False)


def eval_expr(expr: Expr, aliases: Mapping[str, str]) -> EvalResult:
    """Evaluate an expression tree, running the commands it holds."""
    if isinstance(expr, Command):
        return _eval_command(expr, aliases)
    if isinstance(expr, Sequence):
        return _eval_sequence(expr.exprs, aliases)
    if isinstance(expr, And):
        left = eval_expr(expr.lhs, aliases)
        if not left.success and not left.should_exit:
            return _FAILED
        return eval_expr(expr.rhs, aliases)
    if isinstance(expr, Or):
        left = eval_expr(expr.lhs, aliases)
        if left.success and not left.should_exit:
            return EvalResult(success=True, should_exit=False)
        return eval_expr(expr.rhs, aliases)
    if isinstance(expr, Pipeline):
        return _eval_pipeline(expr.commands, aliases)
    raise TypeError(f"not an expression: {expr!r}")


def parse_and_execute(input: str, aliases: Mapping[str, str]) -> bool:
    """Parse and run a command line; return True if the shell should exit.

    Raises ParseError when the line is malformed.
    """
    if not input.strip():
        return False
    expr = parse_expr(tokenize(input))
    return eval_expr(expr, aliases).should_exit