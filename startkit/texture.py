"""Images that can be drawn onto a render target."""

from __future__ import annotations

import math
import os
from enum import IntFlag

import pygame

from .errors import ErrorCode, StartError


class Flip(IntFlag):
    """Mirroring applied to a texture when it is drawn."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


def _as_rect(rect) -> pygame.Rect:
    """Turn a rectangle-like object or tuple into a ``pygame.Rect``."""
    if hasattr(rect, "w") and hasattr(rect, "h"):
        return pygame.Rect(int(rect.x), int(rect.y), int(rect.w), int(rect.h))
    return pygame.Rect(rect)


def _as_point(point) -> tuple[float, float]:
    if hasattr(point, "x") and hasattr(point, "y"):
        return float(point.x), float(point.y)
    x, y = point
    return float(x), float(y)


class Texture:
    """An image bound to the surface it is drawn onto."""

    def __init__(self, target: pygame.Surface, surface: pygame.Surface) -> None:
        if target is None or surface is None:
            raise StartError(ErrorCode.NULL_POINTER, "a texture needs a target and an image")
        self.target = target
        self.surface = surface

    @classmethod
    def load(cls, target: pygame.Surface, filename: str | os.PathLike) -> Texture:
        """Load an image file as a texture drawn onto ``target``."""
        try:
            surface = pygame.image.load(os.fspath(filename))
        except (pygame.error, OSError) as exc:
            raise StartError(ErrorCode.SDL, f"cannot load {filename}: {exc}") from exc
        return cls(target, surface)

    def _region(self, src) -> pygame.Surface:
        if src is None:
            return self.surface
        try:
            return self.surface.subsurface(_as_rect(src))
        except ValueError as exc:
            raise StartError(ErrorCode.INVALID_RANGE, str(exc)) from exc

    def _prepare(self, src, dst) -> tuple[pygame.Surface, pygame.Rect]:
        image = self._region(src)
        area = self.target.get_rect() if dst is None else _as_rect(dst)
        if area.w < 0 or area.h < 0:
            raise StartError(ErrorCode.INVALID_RANGE, "destination size must not be negative")
        if image.get_size() != area.size:
            image = pygame.transform.scale(image, area.size)
        return image, area

    def draw(self, src=None, dst=None) -> None:
        """Copy the ``src`` region (whole image if None) into ``dst``.

        The region is stretched to fit ``dst``; None means the whole target.
        """
        image, area = self._prepare(src, dst)
        self.target.blit(image, area.topleft)

    def draw_ex(self, src=None, dst=None, angle: float = 0.0, center=None, flip: Flip = Flip.NONE) -> None:
        """Draw like :meth:`draw`, then flip and rotate clockwise by ``angle`` degrees.

        ``center`` is the pivot relative to ``dst``; None rotates about its middle.
        """
        image, area = self._prepare(src, dst)
        flip = Flip(flip)
        if flip:
            image = pygame.transform.flip(
                image, bool(flip & Flip.HORIZONTAL), bool(flip & Flip.VERTICAL)
            )
        if angle % 360 == 0:
            self.target.blit(image, area.topleft)
            return
        px, py = (area.w / 2, area.h / 2) if center is None else _as_point(center)
        rotated = pygame.transform.rotate(image, -angle)
        rad = math.radians(angle)
        vx, vy = area.w / 2 - px, area.h / 2 - py
        cx = area.x + px + vx * math.cos(rad) - vy * math.sin(rad)
        cy = area.y + py + vx * math.sin(rad) + vy * math.cos(rad)
        self.target.blit(rotated, rotated.get_rect(center=(round(cx), round(cy))))

    def dimensions(self) -> tuple[int, int]:
        """Return the image's width and height in pixels."""
        return self.surface.get_size()