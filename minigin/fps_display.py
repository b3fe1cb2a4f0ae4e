"""An on-screen frames-per-second counter."""

from __future__ import annotations

from typing import Optional

from .font import Font
from .game_object import GameObject
from .resource_manager import ResourceManager
from .text_object import TextObject
from .timer import Timer

FONT_FILE = "Lingua.otf"
FONT_SIZE = 36
UPDATE_INTERVAL = 1.0


def _format_fps(fps: float) -> str:
    return f"{fps:.1f} FPS"


class FpsDisplay(GameObject):
    """Shows the frame rate, refreshed at most once per second."""

    def __init__(self, font: Optional[Font] = None, timer: Optional[Timer] = None) -> None:
        super().__init__()
        if font is None:
            font = ResourceManager.instance().load_font(FONT_FILE, FONT_SIZE)
        self._timer = timer
        self._fps = 0.0
        self._last_update = 0.0
        self._text = TextObject(_format_fps(self._fps), font)

    @property
    def fps(self) -> float:
        """The last measured frame rate."""
        return self._fps

    @property
    def text(self) -> TextObject:
        """The text object that shows the frame rate."""
        return self._text

    def _clock(self) -> Timer:
        return self._timer if self._timer is not None else Timer.instance()

    def update(self) -> None:
        """Remeasure the frame rate once the update interval has passed."""
        timer = self._clock()
        total = timer.total_elapsed
        if total <= self._last_update + UPDATE_INTERVAL:
            return
        self._last_update = total
        elapsed = timer.elapsed
        self._fps = 1.0 / elapsed if elapsed else float("inf")
        self._text.set_text(_format_fps(self._fps))
        self._text.set_position(0.0, 0.0)
        self._text.update()

    def render(self) -> None:
        """Draw the frame-rate text."""
        self._text.render()