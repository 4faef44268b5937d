"""ANSI escape sequences for coloured terminal output."""

from __future__ import annotations

from enum import Enum


class AnsiColor(str, Enum):
    """Foreground and background colour escape sequences."""

    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    BLUE = "\x1b[34m"
    BLACK = "\x1b[30m"
    YELLOW = "\x1b[33m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"

    RESET = "\x1b[0m"

    BG_RED = "\x1b[41m"
    BG_GREEN = "\x1b[42m"
    BG_BLUE = "\x1b[44m"
    BG_BLACK = "\x1b[40m"
    BG_YELLOW = "\x1b[43m"
    BG_MAGENTA = "\x1b[45m"
    BG_CYAN = "\x1b[46m"
    BG_WHITE = "\x1b[47m"

    def wrap(self, text: str) -> str:
        """Return ``text`` coloured with this sequence and followed by a reset."""
        return f"{self.value}{text}{AnsiColor.RESET.value}"