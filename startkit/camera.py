"""A camera that follows a point and maps world to screen coordinates."""

from __future__ import annotations

from .errors import ErrorCode, StartError
from .geometry import Vector2


class Camera:
    """A view of ``width`` by ``height`` whose top-left corner is ``position``."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.position = Vector2()
        self.target: Vector2 | None = None

    def bind(self, point: Vector2) -> None:
        """Follow ``point``; later calls to :meth:`center` track its current value."""
        if point is None:
            raise StartError(ErrorCode.NULL_POINTER, "camera needs a point to bind to")
        self.target = point

    def center(self) -> None:
        """Move the camera so its bound point lies in the middle of the view."""
        if self.target is None:
            raise StartError(ErrorCode.NULL_POINTER, "camera is not bound to a point")
        self.position.x = self.target.x - self.width / 2
        self.position.y = self.target.y - self.height / 2

    def transform(self, x: float, y: float) -> tuple[float, float]:
        """Return world coordinates ``(x, y)`` relative to the camera."""
        return x - self.position.x, y - self.position.y