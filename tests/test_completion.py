from types import SimpleNamespace

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory

from rynshell.completion import CommandHelper, HistoryHinter, find_hint


def test_blank_line_has_no_hint():
    assert find_hint("", 0, ["ls"]) is None
    assert find_hint("   ", 3, ["ls"]) is None


def test_newest_match_wins():
    entries = ["git status", "git log"]
    assert find_hint("gi", 2, entries) == "git log"[2:]


def test_no_matching_entry():
    assert find_hint("make", 4, ["ls", "cd"]) is None


def test_exact_match_gives_no_hint():
    assert find_hint("ls", 2, ["ls"]) is None


def test_empty_history():
    assert find_hint("ls", 2, []) is None


def _buffer(*lines):
    history = InMemoryHistory()
    for line in lines:
        history.append_string(line)
    return SimpleNamespace(history=history)


def test_hinter_suggests_from_history():
    buffer = _buffer("echo one", "echo two")
    suggestion = HistoryHinter().get_suggestion(buffer, Document("echo", 4))
    assert suggestion.text == "echo two"[4:]


def test_hinter_without_match():
    buffer = _buffer("echo one")
    assert HistoryHinter().get_suggestion(buffer, Document("ls", 2)) is None


def test_completes_last_word_as_filename(tmp_path, monkeypatch):
    (tmp_path / "foo.txt").write_text("x")
    (tmp_path / "bar.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    completions = list(
        CommandHelper().get_completions(Document("cat fo", 6), CompleteEvent())
    )
    assert ["fo" + c.text for c in completions] == ["foo.txt"]


def test_directory_completion_has_slash(tmp_path, monkeypatch):
    (tmp_path / "subdir").mkdir()
    monkeypatch.chdir(tmp_path)
    completions = list(
        CommandHelper().get_completions(Document("cd su", 5), CompleteEvent())
    )
    assert len(completions) == 1
    assert ("su" + completions[0].text).startswith("subdir")
    assert completions[0].text.endswith("/")