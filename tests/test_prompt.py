import os
import re
import subprocess
from unittest.mock import patch

from rynshell.prompt import format_duration, get_git_info, parse_prompt


def _fake_git(returncode=0, dirty=False):
    def run(args, **kwargs):
        if "--show-toplevel" in args:
            out = b"/work/proj\n" if returncode == 0 else b""
            return subprocess.CompletedProcess(args, returncode, out, b"")
        if "--abbrev-ref" in args:
            return subprocess.CompletedProcess(args, 0, b"main\n", b"")
        out = b" M file.txt\n" if dirty else b""
        return subprocess.CompletedProcess(args, 0, out, b"")

    return run


def test_format_duration_values():
    assert format_duration(3723) == "1h 2m 3s"
    assert format_duration(90) == "1m 30s"


def test_format_duration_zero():
    assert format_duration(0) == "0s"


def test_format_duration_parts_are_ordered():
    text = format_duration(2 * 86_400 + 5)
    assert text.startswith("2days")
    assert text.endswith("5s")


def test_user_placeholder(monkeypatch):
    monkeypatch.setenv("USER", "alice")
    assert parse_prompt("{user}", None) == "\x1b[32malice\x1b[0m"


def test_dir_placeholder(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert parse_prompt("{dir}", None) == os.getcwd()


def test_compactdir_segments_are_short(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = parse_prompt("{compactdir}", None)
    assert result
    assert all(len(part) <= 1 for part in result.split("/"))


def test_time24_format():
    result = parse_prompt("{time24}", None)
    assert result[:5] == "\x1b[93m"
    assert result[-4:] == "\x1b[0m"
    clock = result[5:-4]
    assert len(clock) == 8
    assert re.fullmatch(r"\d\d:\d\d:\d\d", clock) is not None


def test_timetaken_short_or_missing_is_empty():
    assert parse_prompt("{timetaken}>", None) == ">"
    assert parse_prompt("{timetaken}>", 0.5) == ">"


def test_timetaken_long():
    result = parse_prompt("{timetaken}", 3723.4)
    assert result == "\x1b[33m" + format_duration(3723) + "\x1b[0m"


def test_double_spaces_collapse_and_leading_trimmed():
    assert parse_prompt("  a  b", None) == "a b"


def test_git_info_clean_repo():
    with patch("rynshell.prompt.subprocess.run", side_effect=_fake_git()):
        info = get_git_info()
    assert "proj" in info
    assert "main" in info
    assert "✔" in info


def test_git_info_dirty_repo():
    with patch("rynshell.prompt.subprocess.run", side_effect=_fake_git(dirty=True)):
        info = get_git_info()
    assert "[!]" in info


def test_git_info_outside_repo():
    with patch("rynshell.prompt.subprocess.run", side_effect=_fake_git(returncode=128)):
        assert get_git_info() is None


def test_git_info_without_git():
    with patch("rynshell.prompt.subprocess.run", side_effect=FileNotFoundError):
        assert get_git_info() is None


def test_ifnotgit_hidden_in_repo(monkeypatch):
    monkeypatch.setenv("USER", "alice")
    with patch("rynshell.prompt.subprocess.run", side_effect=_fake_git()):
        result = parse_prompt("{user ifnotgit}{git} > ", None)
    assert "alice" not in result
    assert "proj" in result


def test_ifnotgit_shown_outside_repo(monkeypatch):
    monkeypatch.setenv("USER", "alice")
    with patch("rynshell.prompt.subprocess.run", side_effect=FileNotFoundError):
        result = parse_prompt("{user ifnotgit}{git}>", None)
    assert result == "\x1b[32malice\x1b[0m>"