"""Subsystem start-up, filesystem helpers and console messages."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TextIO

import pygame

from .errors import ErrorCode, StartError
from .terminal import AnsiColor

DEFAULT_CONFIGURATION_DIRECTORY = "configs"


class MessageType(Enum):
    """Kinds of console message, each with its own prefix colour."""

    ERROR = "ERROR"
    INFO = "INFO"
    SUCCESS = "SUCCESS"

    @property
    def color(self) -> AnsiColor:
        return _MESSAGE_COLORS[self]


_MESSAGE_COLORS = {
    MessageType.ERROR: AnsiColor.RED,
    MessageType.INFO: AnsiColor.YELLOW,
    MessageType.SUCCESS: AnsiColor.GREEN,
}


def start() -> None:
    """Initialise the display and font subsystems."""
    try:
        pygame.display.init()
        pygame.font.init()
    except pygame.error as exc:
        raise StartError(ErrorCode.SDL, str(exc)) from exc


def stop() -> None:
    """Shut down the subsystems started by :func:`start`."""
    pygame.font.quit()
    pygame.display.quit()
    pygame.quit()


def lookup_table_find(table: Mapping[str, int] | Iterable[tuple[str, int]], flag: str) -> int:
    """Return the integer associated with ``flag`` in ``table``.

    ``table`` is a mapping or an iterable of ``(name, value)`` pairs; the first
    matching entry wins.
    """
    entries = table.items() if isinstance(table, Mapping) else table
    for name, value in entries:
        if name == flag:
            return value
    raise StartError(ErrorCode.ITEM_NOT_FOUND, f"unknown flag: {flag!r}")


def file_exists(filename: str | os.PathLike) -> bool:
    """Return True if ``filename`` exists and can be opened for reading."""
    try:
        with open(filename, "rb"):
            return True
    except OSError:
        return False


def directory_exists(path: str | os.PathLike) -> bool:
    """Return True if ``path`` exists and is a directory."""
    return os.path.isdir(path)


def directory_new(path: str | os.PathLike) -> bool:
    """Create ``path`` if missing; return True if it was created, False if it existed."""
    if directory_exists(path):
        return False
    try:
        os.mkdir(path)
    except OSError as exc:
        raise StartError(ErrorCode.SYSTEM, str(exc)) from exc
    return True


def print_message(stream: TextIO | None, msg_type: MessageType, fmt: str, *args) -> None:
    """Write a ``printf``-style message with a coloured prefix to ``stream``."""
    stream = sys.stdout if stream is None else stream
    body = fmt % args if args else fmt
    prefix = msg_type.color.wrap(f"[{msg_type.value}]")
    stream.write(f"{prefix} {body}\n")
    stream.flush()


def error(stream: TextIO | None, fmt: str, *args) -> None:
    """Print a message reporting a failure."""
    print_message(stream, MessageType.ERROR, fmt, *args)


def warning(stream: TextIO | None, fmt: str, *args) -> None:
    """Print an informational warning message."""
    print_message(stream, MessageType.INFO, fmt, *args)


def success(stream: TextIO | None, fmt: str, *args) -> None:
    """Print a message reporting a successful operation."""
    print_message(stream, MessageType.SUCCESS, fmt, *args)