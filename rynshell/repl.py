"""Interactive read-eval-print loop and command entry point."""

from __future__ import annotations

import signal
import sys
import time
from types import FrameType
from typing import Any, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.shortcuts import CompleteStyle

from rynshell.completion import HINT_STYLE, CommandHelper, HistoryHinter
from rynshell.config import load_config
from rynshell.eval import parse_and_execute
from rynshell.history import load_history, setup_history
from rynshell.parser import ParseError
from rynshell.prompt import parse_prompt


def _on_interrupt(signum: int, frame: FrameType | None) -> None:
    sys.stdout.flush()


def setup_ctrlc_handler() -> Any:
    """Keep Ctrl-C from killing the shell; return the handler it replaces."""
    return signal.signal(signal.SIGINT, _on_interrupt)


def run() -> None:
    """Run the interactive shell until ``exit`` or end of input."""
    setup_ctrlc_handler()

    history = setup_history()
    file_history = load_history(history)
    config = load_config()

    session = PromptSession(
        history=file_history,
        completer=CommandHelper(),
        auto_suggest=HistoryHinter(),
        complete_style=CompleteStyle.READLINE_LIKE,
        style=HINT_STYLE,
    )

    last_duration: float | None = None
    while True:
        prompt = parse_prompt(config.prompt, last_duration)
        sys.stdout.write(config.cursor.ansi_code())
        sys.stdout.flush()

        try:
            line = session.prompt(ANSI(prompt))
        except KeyboardInterrupt:
            continue
        except EOFError:
            print("exit")
            break
        except Exception as err:
            print(f"Error reading input: {err!r}", file=sys.stderr)
            break

        line = line.strip()
        if not line:
            continue

        start = time.monotonic()
        try:
            should_exit = parse_and_execute(line, config.aliases)
        except ParseError as err:
            print(err)
            continue
        if should_exit:
            break
        last_duration = time.monotonic() - start


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shell; errors are reported rather than raised."""
    try:
        run()
    except Exception as err:
        print(f"Shell exited with error: {err}", file=sys.stderr)
    return 0