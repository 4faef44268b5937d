"""The application window and its drawing surface."""

from __future__ import annotations

import pygame

from .errors import ErrorCode, StartError


class Window:
    """A titled window of ``width`` by ``height`` created with pygame display ``flags``."""

    def __init__(self, title: str, width: int, height: int, flags: int = 0) -> None:
        try:
            if not pygame.display.get_init():
                pygame.display.init()
            surface = pygame.display.set_mode((width, height), flags)
            pygame.display.set_caption(title)
        except pygame.error as exc:
            raise StartError(ErrorCode.SDL, str(exc)) from exc
        self.title = title
        self._surface: pygame.Surface | None = surface

    def context(self) -> pygame.Surface:
        """Return the surface that drawing goes to."""
        if self._surface is None:
            raise StartError(ErrorCode.NULL_POINTER, "window has been closed")
        return self._surface

    @property
    def closed(self) -> bool:
        return self._surface is None

    def close(self) -> None:
        """Close the window; closing twice has no further effect."""
        if self._surface is None:
            return
        self._surface = None
        pygame.display.quit()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()