"""Shell configuration: prompt, cursor style and aliases."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from pathlib import Path

import platformdirs

DEFAULT_PROMPT = "{time24} {user ifnotgit} {host ifnotgit}{git} > "

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_RED_BOLD = "\x1b[1;31m"
_BRIGHT_RED = "\x1b[91m"


class CursorStyle(enum.Enum):
    """Terminal cursor shapes, valued by their DECSCUSR code."""

    BLINKING_BLOCK = 1
    STEADY_BLOCK = 2
    BLINKING_UNDERLINE = 3
    STEADY_UNDERLINE = 4
    BLINKING_BAR = 5
    STEADY_BAR = 6

    def ansi_code(self) -> str:
        """Escape sequence that selects this cursor style."""
        return f"\x1b[{self.value} q"

    @classmethod
    def from_name(cls, text: str) -> CursorStyle:
        """Parse a style name such as ``SteadyBar``; raise ValueError if unknown."""
        wanted = text.strip().lower()
        for style in cls:
            if style.name.replace("_", "").lower() == wanted:
                return style
        raise ValueError(f"unknown cursor style: {text!r}")


@dataclass
class Config:
    """User settings for the shell."""

    prompt: str = DEFAULT_PROMPT
    cursor: CursorStyle = CursorStyle.BLINKING_BAR
    aliases: dict[str, str] = field(default_factory=dict)


class ConfigSyntaxError(Exception):
    """A malformed line in the configuration file."""

    def __init__(self, line_number: int, line: str, message: str) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line
        self.message = message

    def __str__(self) -> str:
        return (
            f"config: {_RED_BOLD}Syntax error{_RESET} on line {self.line_number}:\n"
            f"  {self.line}\n"
            f"  {_BRIGHT_RED}{'^' * len(self.line)}{_RESET}\n"
            f"{self.message}"
        )


def parse_config(text: str) -> Config:
    """Parse configuration text; raise ConfigSyntaxError on the first bad line."""
    config = Config()
    for line_number, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            raise ConfigSyntaxError(
                line_number, line, f"Expected {_BOLD}key = value{_RESET}"
            )
        key, _, rest = line.partition("=")
        key = key.strip()
        value = rest.strip().strip('"')

        if key.startswith("alias"):
            name = key.partition(" ")[2].strip()
            config.aliases[name] = value.strip()
        elif key == "prompt":
            config.prompt = value
        elif key == "cursor":
            try:
                config.cursor = CursorStyle.from_name(value)
            except ValueError:
                raise ConfigSyntaxError(
                    line_number, line, f"Invalid cursor style: '{value}'"
                ) from None
        else:
            raise ConfigSyntaxError(line_number, line, f"Unknown config key: '{key}'")
    return config


def _default_path() -> Path:
    return platformdirs.user_config_path() / "ryn" / "config"


def load_config(path: str | Path | None = None) -> Config:
    """Load the config file; a missing file gives defaults, a bad one is reported."""
    config_path = Path(path) if path is not None else _default_path()
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        text = ""
    try:
        return parse_config(text)
    except ConfigSyntaxError as err:
        print(err, file=sys.stderr)
        return Config()