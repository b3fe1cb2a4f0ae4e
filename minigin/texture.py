"""An image that can be drawn by the renderer."""

from __future__ import annotations

import os
from typing import NamedTuple, Union

import pygame

PathLike = Union[str, "os.PathLike[str]"]


class Vec2(NamedTuple):
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0


class Texture2D:
    """Owns a pixel surface ready to be drawn."""

    def __init__(self, surface: pygame.Surface) -> None:
        if surface is None:
            raise ValueError("Texture2D needs a surface")
        self.surface = surface

    @classmethod
    def from_file(cls, full_path: PathLike) -> Texture2D:
        """Load an image file into a new texture."""
        try:
            surface = pygame.image.load(os.fspath(full_path))
        except (OSError, pygame.error) as exc:
            raise RuntimeError(f"Failed to load PNG: {exc}") from exc
        if pygame.display.get_surface() is not None:
            try:
                surface = surface.convert_alpha()
            except pygame.error as exc:
                raise RuntimeError(
                    f"Failed to create texture from surface: {exc}"
                ) from exc
        return cls(surface)

    @property
    def size(self) -> Vec2:
        """Width and height in pixels."""
        width, height = self.surface.get_size()
        return Vec2(float(width), float(height))