"""A game clock with a speed modifier and a simple timer."""

from __future__ import annotations

import time
from collections.abc import Callable

from .errors import ErrorCode, StartError


class Clock:
    """Tracks elapsed time between updates, scaled by a speed modifier.

    ``time_source`` returns the current time in seconds; it defaults to
    :func:`time.perf_counter`.
    """

    def __init__(self, time_source: Callable[[], float] | None = None) -> None:
        self._now = time_source if time_source is not None else time.perf_counter
        self.running = False
        self.speed = 1.0
        self._last = 0.0
        self._delta = 0.0
        self._elapsed = 0.0
        self._target: float | None = None

    def start(self) -> None:
        """Start (or restart) the clock from the current moment."""
        self.running = True
        self._last = self._now()
        self._delta = 0.0

    def stop(self) -> None:
        """Stop the clock; updates no longer advance it."""
        self.running = False
        self._delta = 0.0

    def update(self) -> None:
        """Advance the clock by the scaled time since the last update."""
        if not self.running:
            self._delta = 0.0
            return
        now = self._now()
        self._delta = (now - self._last) * self.speed
        self._last = now
        self._elapsed += self._delta

    def set_speed(self, speed: float) -> None:
        """Set the speed modifier; 1.0 is real time."""
        if not self.running:
            raise StartError(ErrorCode.INVALID_RANGE, "cannot adjust a stopped clock")
        if speed < 0:
            raise StartError(ErrorCode.INVALID_RANGE, "clock speed must not be negative")
        self.speed = float(speed)

    def is_ready(self) -> bool:
        """Return True once the timer has reached its set time."""
        return self._target is not None and self._elapsed >= self._target

    def reset(self) -> None:
        """Restart the timer from zero."""
        self._elapsed = 0.0

    def set_timer(self, seconds: float) -> None:
        """Set the timer to ``seconds``; ignored while the clock is stopped."""
        if seconds < 0:
            raise StartError(ErrorCode.INVALID_RANGE, "timer must not be negative")
        if not self.running:
            return
        self._target = float(seconds)
        self._elapsed = 0.0

    def delta(self) -> float:
        """Return the scaled time that passed during the last update."""
        return self._delta