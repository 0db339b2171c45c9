"""Tokenizer and parser for command lines."""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Iterable

from rynshell.command import And, Command, Expr, Or, Pipeline, Sequence

_OPERATORS = frozenset({"|", "&&", "||", ";"})


class ParseError(Exception):
    """Raised when a command line cannot be parsed."""

    def __init__(self, op: str) -> None:
        super().__init__(op)
        self.op = op

    def __str__(self) -> str:
        return f"syntax error: unexpected '{self.op}'"


def _flush(tokens: list[str], current: list[str]) -> None:
    if current:
        tokens.append("".join(current))
        current.clear()


def tokenize(input: str) -> list[str]:
    """Split a command line into words and operator tokens."""
    tokens: list[str] = []
    current: list[str] = []
    in_double = False
    in_single = False
    chars = iter(enumerate(input))
    for i, c in chars:
        quoted = in_double or in_single
        if c == '"':
            in_double = not in_double
        elif c == "'":
            in_single = not in_single
        elif c == " " and not quoted:
            _flush(tokens, current)
        elif c in "&|" and not quoted:
            _flush(tokens, current)
            if input[i + 1 : i + 2] == c:
                tokens.append(c * 2)
                next(chars)
            else:
                tokens.append(c)
        elif c == ";" and not quoted:
            _flush(tokens, current)
            tokens.append(c)
        elif c == "~" and not quoted and not current:
            try:
                current.append(str(Path.home()))
            except RuntimeError:
                raise ParseError("could not resolve home directory") from None
        else:
            current.append(c)
    _flush(tokens, current)
    return tokens


class _Parser:
    def __init__(self, tokens: Iterable[str]) -> None:
        self.tokens = deque(tokens)

    def _peek(self) -> str | None:
        return self.tokens[0] if self.tokens else None

    def _words(self) -> list[str]:
        words = []
        while self.tokens and self.tokens[0] not in _OPERATORS:
            words.append(self.tokens.popleft())
        return words

    def expr(self) -> Expr:
        lhs = self.simple()
        while (op := self._peek()) is not None:
            if op in ("&&", "||"):
                self.tokens.popleft()
                rhs = self.expr()
                lhs = And(lhs, rhs) if op == "&&" else Or(lhs, rhs)
            elif op == ";":
                self.tokens.popleft()
                lhs = Sequence([lhs, self.expr()])
            else:
                break
        return lhs

    def simple(self) -> Expr:
        if not self.tokens:
            raise ParseError("empty")
        first = self._words()
        if not first:
            raise ParseError("expected command")
        pipeline: list[Expr] = [Command(first)]
        while self._peek() == "|":
            self.tokens.popleft()
            words = self._words()
            if not words:
                raise ParseError("expected command after |")
            pipeline.append(Command(words))
        return pipeline[0] if len(pipeline) == 1 else Pipeline(pipeline)


def parse_expr(tokens: Iterable[str]) -> Expr:
    """Build an expression tree from a token sequence."""
    return _Parser(tokens).expr()