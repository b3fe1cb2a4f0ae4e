"""Holds every scene and drives them."""

from __future__ import annotations

from .scene import Scene
from .singleton import Singleton


class SceneManager(Singleton):
    """Creates scenes and updates and renders them in creation order."""

    def __init__(self) -> None:
        self._scenes: list[Scene] = []

    @property
    def scenes(self) -> tuple[Scene, ...]:
        """The scenes in creation order."""
        return tuple(self._scenes)

    def create_scene(self) -> Scene:
        """Create, register and return a new empty scene."""
        scene = Scene()
        self._scenes.append(scene)
        return scene

    def update(self) -> None:
        """Update every scene."""
        for scene in self._scenes:
            scene.update()

    def render(self) -> None:
        """Render every scene."""
        for scene in self._scenes:
            scene.render()