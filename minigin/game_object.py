"""The basic drawable object of a scene."""

from __future__ import annotations

from typing import Optional

from .renderer import Renderer
from .resource_manager import ResourceManager
from .texture import Texture2D
from .transform import Transform


class GameObject:
    """An object with a position and an optional texture."""

    def __init__(self) -> None:
        self.transform = Transform()
        self._texture: Optional[Texture2D] = None

    @property
    def texture(self) -> Optional[Texture2D]:
        """The texture drawn for this object, if any."""
        return self._texture

    def update(self) -> None:
        """Advance the object by one frame; does nothing by default."""

    def render(self) -> None:
        """Draw the texture at the object's position."""
        if self._texture is None:
            raise RuntimeError("GameObject has no texture to render")
        pos = self.transform.position
        Renderer.instance().render_texture(self._texture, pos.x, pos.y)

    def set_texture(self, filename: str) -> None:
        """Use the texture loaded from ``filename`` in the data directory."""
        self._texture = ResourceManager.instance().load_texture(filename)

    def set_position(self, x: float, y: float) -> None:
        """Move the object to (x, y)."""
        self.transform.set_position(x, y, 0.0)

    def __copy__(self) -> GameObject:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo: dict) -> GameObject:
        raise TypeError(f"{type(self).__name__} cannot be copied")