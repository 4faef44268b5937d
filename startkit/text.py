"""Rendered strings of text."""

from __future__ import annotations

import pygame

from .errors import ErrorCode, StartError
from .texture import Flip, Texture

TEXT_BUFFER = 64
_MAX_LENGTH = TEXT_BUFFER - 2


class Text:
    """A string rendered with a font and colour, ready to be drawn onto ``target``."""

    def __init__(self, target: pygame.Surface, font: pygame.font.Font, color, content: str) -> None:
        if target is None:
            raise StartError(ErrorCode.NULL_POINTER, "text needs a target")
        if font is None:
            raise StartError(ErrorCode.NULL_POINTER, "text needs a font")
        if color is None:
            raise StartError(ErrorCode.NULL_POINTER, "text needs a colour")
        self.target = target
        self.font = font
        self.color = pygame.Color(color)
        self.content = ""
        self.texture: Texture | None = None
        self.width = 0
        self.height = 0
        self.update(content)

    def update(self, content: str) -> None:
        """Replace the text, keeping at most the first characters that fit the buffer."""
        self.content = content[:_MAX_LENGTH]
        try:
            surface = self.font.render(self.content, False, self.color)
        except pygame.error as exc:
            raise StartError(ErrorCode.SDL, str(exc)) from exc
        self.texture = Texture(self.target, surface)
        self.width, self.height = self.texture.dimensions()

    def set_color(self, color) -> None:
        """Re-render the text in ``color``."""
        if color is None:
            raise StartError(ErrorCode.NULL_POINTER, "text needs a colour")
        self.color = pygame.Color(color)
        self.update(self.content)

    def set_font(self, font: pygame.font.Font) -> None:
        """Re-render the text with ``font``."""
        if font is None:
            raise StartError(ErrorCode.NULL_POINTER, "text needs a font")
        self.font = font
        self.update(self.content)

    def draw(self, dst=None) -> None:
        """Draw the whole text into ``dst``; None means the whole target."""
        self.texture.draw(None, dst)

    def draw_ex(self, src=None, dst=None, angle: float = 0.0, center=None, flip: Flip = Flip.NONE) -> None:
        """Draw the text with optional rotation and flipping."""
        self.texture.draw_ex(src, dst, angle, center, flip)