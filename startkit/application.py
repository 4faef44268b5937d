"""The main application: a window, frame timing and the current state."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pygame

from .core import directory_new
from .errors import ErrorCode, StartError
from .window import Window

MIN_FPS = 1
MAX_FPS = 60
SCREENSHOT_DIRECTORY = "screenshots"


class Application:
    """Owns the main window and keeps rendering at a steady frame rate."""

    def __init__(
        self,
        title: str = "Start",
        width: int = 800,
        height: int = 600,
        fps: int = MAX_FPS,
    ) -> None:
        self._target_fps = MAX_FPS
        self.set_fps(fps)
        self.window = Window(title, width, height)
        self._clock = pygame.time.Clock()
        self._running = True
        self._delta = 0.0
        self.state: Any = None

    def quit(self) -> None:
        """Close the window and stop the application."""
        self._running = False
        self.window.close()

    def is_running(self) -> bool:
        """Return True while the application has not been stopped."""
        return self._running

    def render(self) -> None:
        """Present the current frame and wait as needed to hold the target FPS."""
        try:
            pygame.display.flip()
        except pygame.error as exc:
            raise StartError(ErrorCode.SDL, str(exc)) from exc
        self._delta = self._clock.tick(self._target_fps) / 1000.0

    def set_fps(self, fps: int) -> None:
        """Set the target frame rate, which must lie between 1 and 60."""
        if not MIN_FPS <= fps <= MAX_FPS:
            raise StartError(
                ErrorCode.INVALID_RANGE,
                f"fps must be between {MIN_FPS} and {MAX_FPS}, got {fps}",
            )
        self._target_fps = int(fps)

    @property
    def target_fps(self) -> int:
        return self._target_fps

    def stop(self) -> None:
        """Toggle the running state."""
        self._running = not self._running

    def delta(self) -> float:
        """Return the seconds that passed between the last two frames."""
        return self._delta

    def fps(self) -> int:
        """Return the frame rate actually achieved."""
        return int(self._clock.get_fps())

    def context(self) -> pygame.Surface:
        """Return the surface that drawing goes to."""
        return self.window.context()

    def take_screenshot(self, filename: str) -> Path:
        """Save the current frame as ``filename`` in the screenshots directory."""
        surface = self.context()
        directory_new(SCREENSHOT_DIRECTORY)
        path = Path(SCREENSHOT_DIRECTORY) / filename
        try:
            pygame.image.save(surface, os.fspath(path))
        except (pygame.error, OSError) as exc:
            raise StartError(ErrorCode.SYSTEM, f"cannot save {path}: {exc}") from exc
        return path

    def __enter__(self) -> Application:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.quit()