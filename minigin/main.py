"""Builds the demo scene and starts the engine."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence, Union

from .engine import Minigin
from .fps_display import FpsDisplay
from .game_object import GameObject
from .resource_manager import ResourceManager
from .scene_manager import SceneManager
from .text_object import TextObject

PathLike = Union[str, "os.PathLike[str]"]


def load() -> None:
    """Fill a new scene with the background, logo, title and frame counter."""
    scene = SceneManager.instance().create_scene()

    background = GameObject()
    background.set_texture("background.png")
    scene.add(background)

    logo = GameObject()
    logo.set_texture("logo.png")
    logo.set_position(358, 180)
    scene.add(logo)

    font = ResourceManager.instance().load_font("Lingua.otf", 36)
    title = TextObject("Programming 4 Assignment", font)
    title.set_color((255, 255, 0, 255))
    title.set_position(292, 20)
    scene.add(title)

    scene.add(FpsDisplay())


def find_data_path(base: Optional[PathLike] = None) -> Path:
    """Return ``base/Data`` if it exists, otherwise ``base/../Data``."""
    root = Path(base) if base is not None else Path(".")
    data = root / "Data"
    if data.exists():
        return data
    return root / ".." / "Data"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the engine on the demo scene."""
    with Minigin(find_data_path()) as engine:
        engine.run(load)
    return 0