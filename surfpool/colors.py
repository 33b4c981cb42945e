"""Terminal colouring helpers used for console output."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, TextIO

_RESET = "\x1b[0m"


class Colour(Enum):
    """Styles used by the console output, as SGR parameter strings."""

    GREEN = "1;32"
    RED = "1;31"
    YELLOW = "1;33"
    CYAN = "1;36"
    PURPLE = "1;35"
    GREY = "38;5;244"

    def paint(self, text: Any) -> str:
        """Wrap ``text`` in this style's escape sequences."""
        return f"\x1b[{self.value}m{text}{_RESET}"


def _is_terminal(stream: Any) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        return False


def colorize(text: Any, colour: Colour, stream: TextIO | None = None) -> str:
    """Paint ``text`` with ``colour`` when ``stream`` (stdout by default) is a terminal."""
    target = sys.stdout if stream is None else stream
    if _is_terminal(target):
        return colour.paint(text)
    return f"{text}"


def green(text: Any) -> str:
    return colorize(text, Colour.GREEN)


def red(text: Any) -> str:
    return colorize(text, Colour.RED)


def yellow(text: Any) -> str:
    return colorize(text, Colour.YELLOW)


def blue(text: Any) -> str:
    return colorize(text, Colour.CYAN)


def purple(text: Any) -> str:
    return colorize(text, Colour.PURPLE)


def black(text: Any) -> str:
    return colorize(text, Colour.GREY)


def pluralize(value: int, word: str) -> str:
    """Return ``value`` followed by ``word``, with an ``s`` when ``value`` exceeds one."""
    if value > 1:
        return f"{value} {word}s"
    return f"{value} {word}"


def format_err(message: Any) -> str:
    return f"{red('error:')} {message}"


def format_warn(message: Any) -> str:
    return f"{yellow('warn:')} {message}"


def format_note(message: Any) -> str:
    return f"{blue('note:')} {message}"