"""Line editing helpers: filename completion and history hints."""

from __future__ import annotations

from typing import Iterable, Iterator

from prompt_toolkit.auto_suggest import AutoSuggest, Suggestion
from prompt_toolkit.completion import CompleteEvent, Completer, Completion, PathCompleter
from prompt_toolkit.document import Document
from prompt_toolkit.styles import Style

HINT_STYLE = Style.from_dict({"auto-suggestion": "ansibrightblack"})


def find_hint(line: str, pos: int, entries: Iterable[str]) -> str | None:
    """Return the rest of the newest history entry that starts with ``line``."""
    if not line.strip():
        return None
    for entry in reversed(list(entries)):
        if entry.startswith(line) and len(entry) > pos:
            return entry[pos:]
    return None


class CommandHelper(Completer):
    """Completes the word under the cursor as a file name."""

    def __init__(self) -> None:
        self._paths = PathCompleter(expanduser=True)

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterator[Completion]:
        word = document.get_word_before_cursor(WORD=True)
        yield from self._paths.get_completions(
            Document(word, len(word)), complete_event
        )


class HistoryHinter(AutoSuggest):
    """Suggests the remainder of a matching history entry."""

    def get_suggestion(self, buffer, document: Document) -> Suggestion | None:
        entries = list(buffer.history.get_strings())
        hint = find_hint(document.text, document.cursor_position, entries)
        return Suggestion(hint) if hint else None