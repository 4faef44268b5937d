"""Base class for interactive widgets such as buttons and menus entries."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .errors import ErrorCode, StartError
from .geometry import Rect, point_in_rect
from .text import Text
from .texture import Texture


class Widget:
    """A positioned, sized element with an optional label and click callback.

    When ``width`` or ``height`` is None it is taken from the label.
    """

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        width: int | None = None,
        height: int | None = None,
        label: Text | None = None,
    ) -> None:
        self.x = x
        self.y = y
        self.label = label
        if width is None:
            width = label.width if label is not None else 0
        if height is None:
            height = label.height if label is not None else 0
        if width < 0 or height < 0:
            raise StartError(ErrorCode.INVALID_RANGE, "widget size must not be negative")
        self.width = width
        self.height = height
        self.focused = False
        self.on_click: Callable[..., Any] | None = None

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def draw(self, target=None, src=None, dst=None) -> None:
        """Draw the label onto ``target`` (the label's own target if None).

        ``dst`` defaults to the widget's own area.
        """
        if self.label is None:
            return
        texture = self.label.texture
        if target is not None:
            texture = Texture(target, texture.surface)
        texture.draw(src, self.rect if dst is None else dst)

    def dimensions(self) -> tuple[int, int]:
        """Return the widget's width and height."""
        return self.width, self.height

    def set_position(self, x: int, y: int) -> None:
        """Move the widget's top-left corner to ``(x, y)``."""
        self.x = x
        self.y = y

    def position(self) -> tuple[int, int]:
        """Return the widget's top-left corner."""
        return self.x, self.y

    def bind_callback(self, callback: Callable[..., Any] | None) -> None:
        """Bind ``callback(widget, *args)`` to clicks; None unbinds."""
        if callback is not None and not callable(callback):
            raise StartError(ErrorCode.UNKNOWN_TYPE, "callback must be callable")
        self.on_click = callback

    def click(self, *args) -> Any:
        """Run the click callback if one is bound and the widget has focus.

        Returns the callback's result, or None when it did not run.
        """
        if self.on_click is None or not self.focused:
            return None
        return self.on_click(self, *args)

    def is_hovered(self, cursor) -> bool:
        """Return True if the ``(x, y)`` cursor lies inside the widget."""
        x, y = cursor
        return point_in_rect(x, y, self.rect)

    def focus(self) -> None:
        """Give the widget focus."""
        self.focused = True

    def unfocus(self) -> None:
        """Take focus away from the widget."""
        self.focused = False

    def set_label_color(self, color) -> None:
        """Re-render the label in ``color``."""
        if self.label is None:
            raise StartError(ErrorCode.NULL_POINTER, "widget has no label")
        self.label.set_color(color)