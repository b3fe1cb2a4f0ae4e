"""A loaded typeface at one size."""

from __future__ import annotations

import os
from typing import Optional, Sequence, Union

import pygame

from .texture import Texture2D

PathLike = Union[str, "os.PathLike[str]"]


class Font:
    """Wraps a loaded font; ``None`` as path selects the built-in default font."""

    def __init__(self, full_path: Optional[PathLike], size: float) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        path = None if full_path is None else os.fspath(full_path)
        try:
            self._font = pygame.font.Font(path, int(size))
        except (OSError, pygame.error) as exc:
            raise RuntimeError(f"Failed to load font: {exc}") from exc
        self.size = size

    @property
    def pygame_font(self) -> pygame.font.Font:
        """The underlying font object."""
        return self._font

    def render_text(
        self, text: str, color: Sequence[int] = (255, 255, 255, 255)
    ) -> Texture2D:
        """Render ``text`` antialiased in ``color`` into a new texture."""
        try:
            surface = self._font.render(text, True, color)
        except (pygame.error, ValueError) as exc:
            raise RuntimeError(f"Render text failed: {exc}") from exc
        return Texture2D(surface)