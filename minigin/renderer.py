"""Draws the scenes onto the window."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from .scene_manager import SceneManager
from .singleton import Singleton
from .texture import Texture2D

Color = Tuple[int, int, int, int]


class Renderer(Singleton):
    """Clears the window, draws every scene and presents the frame."""

    def __init__(self) -> None:
        self._window: Optional[pygame.Surface] = None
        self.background_color: Color = (0, 0, 0, 0)

    def init(self, window: pygame.Surface) -> None:
        """Start drawing onto ``window``."""
        if window is None:
            raise RuntimeError("Failed to create the renderer: no window to draw on")
        self._window = window

    @property
    def window(self) -> Optional[pygame.Surface]:
        """The surface being drawn on, or ``None`` before init or after destroy."""
        return self._window

    def _target(self) -> pygame.Surface:
        if self._window is None:
            raise RuntimeError("Renderer is not initialised")
        return self._window

    def render(self) -> None:
        """Clear to the background colour, draw all scenes and present."""
        target = self._target()
        target.fill(self.background_color)
        SceneManager.instance().render()
        if pygame.display.get_surface() is target:
            pygame.display.flip()

    def destroy(self) -> None:
        """Stop drawing; the renderer must be initialised again before use."""
        self._window = None

    def render_texture(
        self,
        texture: Texture2D,
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None:
        """Draw ``texture`` at (x, y), stretched to width and height when both are given."""
        target = self._target()
        surface = texture.surface
        if width is not None or height is not None:
            if width is None or height is None:
                raise ValueError("width and height must be given together")
            surface = pygame.transform.scale(
                surface, (max(0, round(width)), max(0, round(height)))
            )
        target.blit(surface, (round(x), round(y)))