"""Prompt template expansion."""

from __future__ import annotations

import os
import socket
import subprocess
from datetime import datetime

_IFNOTGIT_KEYS = ("user", "host", "dir", "time24", "timetaken", "compactdir")

_YEAR = 31_557_600
_MONTH = 2_630_016
_DAY = 86_400


def _paint(code: str, text: str) -> str:
    return f"\x1b[{code}m{text}\x1b[0m"


def format_duration(seconds: int) -> str:
    """Render whole seconds as e.g. ``1h 2m 3s``."""
    seconds = int(seconds)
    if seconds == 0:
        return "0s"
    years, rest = divmod(seconds, _YEAR)
    months, rest = divmod(rest, _MONTH)
    days, rest = divmod(rest, _DAY)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)
    parts = [
        f"{value}{name}{'s' if value > 1 else ''}"
        for name, value in (("year", years), ("month", months), ("day", days))
        if value
    ]
    parts += [
        f"{value}{unit}"
        for unit, value in (("h", hours), ("m", minutes), ("s", secs))
        if value
    ]
    return " ".join(parts)


def _git(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(["git", *args], capture_output=True, check=False)


def get_git_info() -> str | None:
    """Describe the current git repository, or None outside of one."""
    try:
        toplevel = _git("rev-parse", "--show-toplevel")
        path = toplevel.stdout.decode("utf-8")
        branch_output = _git("rev-parse", "--abbrev-ref", "HEAD")
        if toplevel.returncode != 0:
            return None
        branch = branch_output.stdout.decode("utf-8").strip()
        status = _git("status", "--porcelain")
    except (OSError, UnicodeDecodeError):
        return None
    repo_name = path.strip().rsplit("/", 1)[-1]
    icon = "!" if status.stdout else "✔"
    return f"{_paint('36', repo_name)} on {_paint('35', ' ' + branch)} {_paint('31', f'[{icon}]')}"


def _current_dir() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def _compact(path: str) -> str:
    return "/".join(part[0] for part in path.split("/") if part and part[0].isascii())


def _hostname() -> str:
    try:
        return socket.gethostname() or "host"
    except OSError:
        return "host"


def parse_prompt(prompt_string: str, time_taken: float | None) -> str:
    """Expand ``{placeholders}`` in a prompt template.

    ``time_taken`` is the duration of the last command in seconds.
    """
    output = prompt_string
    git_cache: list[str | None] = []

    def git_info() -> str | None:
        if not git_cache:
            git_cache.append(get_git_info())
        return git_cache[0]

    if "ifnotgit" in prompt_string:
        for key in _IFNOTGIT_KEYS:
            placeholder = f"{{{key} ifnotgit}}"
            if placeholder in output and git_info() is not None:
                output = output.replace(placeholder, "")
            else:
                output = output.replace(placeholder, f"{{{key}}}")

    variables: dict[str, str] = {}
    if "{user}" in output:
        variables["user"] = _paint("32", os.environ.get("USER", "user"))
    if "{host}" in output:
        variables["host"] = _paint("34", _hostname())
    if "{dir}" in output:
        directory = _current_dir()
        if directory is not None:
            variables["dir"] = directory
    if "{compactdir}" in output:
        directory = _current_dir()
        if directory is not None:
            variables["compactdir"] = _compact(directory)
    if "{git}" in output:
        variables["git"] = git_info() or ""
    if "{time24}" in output:
        variables["time24"] = _paint("93", datetime.now().strftime("%H:%M:%S"))
    if "{timetaken}" in output:
        if time_taken is None or time_taken < 1:
            variables["timetaken"] = ""
        else:
            variables["timetaken"] = _paint("33", format_duration(int(time_taken)))

    for key, value in variables.items():
        output = output.replace(f"{{{key}}}", value)

    return output.lstrip().replace("  ", " ")