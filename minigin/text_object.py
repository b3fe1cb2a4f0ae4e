"""A game object that draws a line of text."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .font import Font
from .game_object import GameObject
from .renderer import Renderer

Color = Tuple[int, ...]

WHITE: Color = (255, 255, 255, 255)


class TextObject(GameObject):
    """Renders ``text`` in ``font`` and ``color``; the texture is rebuilt lazily on update."""

    def __init__(
        self,
        text: str = "",
        font: Optional[Font] = None,
        color: Sequence[int] = WHITE,
    ) -> None:
        super().__init__()
        self._text = text
        self._font = font
        self._color: Color = tuple(color)
        self._needs_update = font is not None

    @property
    def text(self) -> str:
        """The text shown."""
        return self._text

    @property
    def color(self) -> Color:
        """The colour the text is drawn in."""
        return self._color

    @property
    def font(self) -> Optional[Font]:
        """The font the text is drawn with."""
        return self._font

    @property
    def needs_update(self) -> bool:
        """Whether the texture is out of date with the text or colour."""
        return self._needs_update

    def update(self) -> None:
        """Rebuild the text texture if the text or colour changed."""
        if not self._needs_update:
            return
        if self._font is None:
            raise RuntimeError("Render text failed: no font set")
        self._texture = self._font.render_text(self._text, self._color)
        self._needs_update = False

    def render(self) -> None:
        """Draw the text texture at the object's position, if one was built."""
        if self._texture is None:
            return
        pos = self.transform.position
        Renderer.instance().render_texture(self._texture, pos.x, pos.y)

    def set_text(self, text: str) -> None:
        """Change the text; the texture is rebuilt on the next update."""
        self._text = text
        self._needs_update = True

    def set_position(self, x: float, y: float) -> None:
        """Move the text to (x, y)."""
        self.transform.set_position(x, y)

    def set_color(self, color: Sequence[int]) -> None:
        """Change the colour; the texture is rebuilt on the next update."""
        self._color = tuple(color)
        self._needs_update = True