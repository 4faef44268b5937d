"""Keyboard and mouse state with edge detection between updates."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

import pygame

from .errors import ErrorCode, StartError


class MouseButton(IntEnum):
    """Mouse buttons, numbered as pygame reports them."""

    LMB = 0
    MMB = 1
    RMB = 2


class _PressedKeys:
    """Answers ``key in keys`` from pygame's pressed-key table."""

    def __init__(self, state) -> None:
        self._state = state

    def __contains__(self, key: object) -> bool:
        try:
            return bool(self._state[key])
        except (IndexError, TypeError):
            return False


def _button(button) -> MouseButton:
    try:
        return MouseButton(button)
    except ValueError as exc:
        raise StartError(ErrorCode.UNKNOWN_TYPE, f"unknown mouse button: {button!r}") from exc


class Input:
    """Holds the current and previous keyboard and mouse states."""

    def __init__(self) -> None:
        self._keys = frozenset()
        self._prev_keys = frozenset()
        self._buttons: frozenset[MouseButton] = frozenset()
        self._prev_buttons: frozenset[MouseButton] = frozenset()
        self._cursor = (0, 0)

    def update(self, keys, buttons: Iterable, cursor: tuple[int, int]) -> None:
        """Record a new state: pressed keys, pressed buttons and the cursor position."""
        self._prev_keys = self._keys
        self._prev_buttons = self._buttons
        self._keys = keys if isinstance(keys, _PressedKeys) else frozenset(keys)
        self._buttons = frozenset(_button(b) for b in buttons)
        x, y = cursor
        self._cursor = (int(x), int(y))

    def poll(self) -> None:
        """Read the keyboard and mouse from pygame and record the state."""
        try:
            keys = _PressedKeys(pygame.key.get_pressed())
            pressed = pygame.mouse.get_pressed(3)
            cursor = pygame.mouse.get_pos()
        except pygame.error as exc:
            raise StartError(ErrorCode.SDL, str(exc)) from exc
        buttons = [button for button in MouseButton if pressed[button]]
        self.update(keys, buttons, cursor)

    def is_key_pressed(self, key) -> bool:
        """Return True if ``key`` is held down now."""
        return key in self._keys

    def was_key_pressed(self, key) -> bool:
        """Return True if ``key`` went down since the previous update."""
        return key in self._keys and key not in self._prev_keys

    def is_button_pressed(self, button) -> bool:
        """Return True if ``button`` is held down now."""
        return _button(button) in self._buttons

    def was_button_pressed(self, button) -> bool:
        """Return True if ``button`` went down since the previous update."""
        button = _button(button)
        return button in self._buttons and button not in self._prev_buttons

    def cursor_position(self) -> tuple[int, int]:
        """Return the cursor's ``(x, y)`` position."""
        return self._cursor