"""A collection of game objects updated and drawn together."""

from __future__ import annotations

from typing import Iterator, Protocol


class SceneObject(Protocol):
    def update(self) -> None: ...

    def render(self) -> None: ...


class Scene:
    """Owns an ordered list of objects."""

    def __init__(self) -> None:
        self._objects: list[SceneObject] = []

    def add(self, obj: SceneObject) -> None:
        """Append an object; ``None`` is refused."""
        if obj is None:
            raise ValueError("Cannot add a null GameObject to the scene.")
        self._objects.append(obj)

    def remove(self, obj: SceneObject) -> None:
        """Remove every occurrence of this very object."""
        self._objects = [o for o in self._objects if o is not obj]

    def remove_all(self) -> None:
        """Remove every object."""
        self._objects.clear()

    def update(self) -> None:
        """Update each object in insertion order."""
        for obj in self._objects:
            obj.update()

    def render(self) -> None:
        """Render each object in insertion order."""
        for obj in self._objects:
            obj.render()

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, obj: object) -> bool:
        return any(o is obj for o in self._objects)