"""Frame-by-frame sprite animation over a sprite sheet."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import ErrorCode, StartError
from .geometry import Rect

DEFAULT_SPEED = 0.1


class AnimationAxis(Enum):
    """Direction in which successive frames are laid out on the sheet."""

    X = "x"
    Y = "y"


class Animation:
    """Steps through ``num_frames`` sprites of ``width`` by ``height``.

    The first frame's top-left corner sits at ``(x_offset, y_offset)`` on the
    sheet; later frames follow along ``axis``. The texture is not owned.
    """

    def __init__(
        self,
        texture: Any,
        x_offset: int,
        y_offset: int,
        num_frames: int,
        width: int,
        height: int,
        axis: AnimationAxis,
    ) -> None:
        if num_frames <= 0:
            raise StartError(ErrorCode.INVALID_RANGE, "an animation needs at least one frame")
        if width <= 0 or height <= 0:
            raise StartError(ErrorCode.INVALID_RANGE, "frame size must be positive")
        self.texture = texture
        self.x_offset = x_offset
        self.y_offset = y_offset
        self.num_frames = num_frames
        self.width = width
        self.height = height
        self.axis = AnimationAxis(axis)
        self.speed = DEFAULT_SPEED
        self.last_time_updated = 0.0
        self.current_frame = 0
        self.frame = Rect(x_offset, y_offset, width, height)

    def _place_frame(self) -> None:
        if self.axis is AnimationAxis.X:
            self.frame.x = self.x_offset + self.current_frame * self.width
        else:
            self.frame.y = self.y_offset + self.current_frame * self.height

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds, moving on a frame per ``speed`` seconds."""
        self.last_time_updated += delta_time
        steps, self.last_time_updated = divmod(self.last_time_updated, self.speed)
        if steps:
            self.current_frame = (self.current_frame + int(steps)) % self.num_frames
            self._place_frame()

    def set_speed(self, speed: float) -> None:
        """Set the number of seconds each frame is shown."""
        if speed <= 0:
            raise StartError(ErrorCode.INVALID_RANGE, "animation speed must be positive")
        self.speed = float(speed)