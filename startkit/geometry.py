"""Rectangles, point tests and two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .errors import ErrorCode, StartError


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float


def point_in_rect(x: float, y: float, rect) -> bool:
    """Return True if ``(x, y)`` lies strictly inside ``rect``.

    ``rect`` may be any object with ``x``, ``y``, ``w`` and ``h`` attributes.
    """
    return rect.x < x < rect.x + rect.w and rect.y < y < rect.y + rect.h


@dataclass
class Vector2:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise StartError(ErrorCode.DIVIDE_ZERO, "cannot divide a vector by zero")
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Return a unit vector pointing the same way."""
        return self / self.magnitude()

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        unit = self.normalized()
        self.x, self.y = unit.x, unit.y