"""ANSI styling for runner output."""

from __future__ import annotations

from enum import Enum
from typing import IO

import typer

GREEN = "\x1b[32m"
BRIGHT_RED = "\x1b[31;1m"
RESET = "\x1b[0m"


class ColorMode(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def green(text: str) -> str:
    return f"{GREEN}{text}{RESET}"


def bright_red(text: str) -> str:
    return f"{BRIGHT_RED}{text}{RESET}"


class Terminal:
    """Writes styled lines to a stream according to a color mode.

    Styling is always applied when a line is built; whether the escape codes
    reach the stream is decided here, so reporting code never has to know
    about terminal capabilities. ``auto`` defers to click, which strips the
    codes when the stream is not a tty. Use ``always`` to get the escape
    codes byte-for-byte on piped or captured output.
    """

    def __init__(self, color: ColorMode = ColorMode.AUTO, file: IO[str] | None = None):
        self.color = ColorMode(color)
        self.file = file

    def _echo_color(self) -> bool | None:
        if self.color is ColorMode.ALWAYS:
            return True
        if self.color is ColorMode.NEVER:
            return False
        return None

    def echo(self, message: str) -> None:
        typer.echo(message, file=self.file, color=self._echo_color())
