"""The engine: window set-up and the main loop."""

from __future__ import annotations

import os
import time
from typing import Callable, Sequence, Union

import pygame

from .input_manager import InputManager
from .renderer import Renderer
from .resource_manager import ResourceManager
from .scene_manager import SceneManager
from .timer import Timer

PathLike = Union[str, "os.PathLike[str]"]

WINDOW_TITLE = "Programming 4 assignment"
WINDOW_SIZE = (1024, 576)
FRAMERATE = 60.0


def _log_version(message: str, version: Sequence[int]) -> None:
    major, minor, patch = version[:3]
    print(f"{message}{major}.{minor}.{patch}")


def _print_sdl_version() -> None:
    _log_version("Compiled with SDL", pygame.get_sdl_version(linked=False))
    _log_version("Linked with SDL ", pygame.get_sdl_version(linked=True))


class Minigin:
    """Opens the window, wires up the renderer and resources, and runs frames."""

    def __init__(self, data_path: PathLike) -> None:
        _print_sdl_version()
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"SDL_Init Error: {exc}") from exc
        try:
            window = pygame.display.set_mode(WINDOW_SIZE)
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError(f"SDL_CreateWindow Error: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self._window = window
        self._quit = False
        self._closed = False
        Renderer.instance().init(window)
        ResourceManager.instance().init(data_path)

    @property
    def window(self) -> pygame.Surface:
        """The window surface."""
        return self._window

    @property
    def quit_requested(self) -> bool:
        """Whether the last frame saw a request to quit."""
        return self._quit

    def run(self, load: Callable[[], None]) -> None:
        """Call ``load`` and then run frames, at most 60 a second, until asked to quit."""
        load()
        timer = Timer.instance()
        frame_time = 1.0 / FRAMERATE
        while not self._quit:
            frame_start = timer.total_elapsed
            timer.lap()
            self.run_one_frame()
            remaining = frame_start + frame_time - timer.total_elapsed
            if remaining > 0:
                time.sleep(remaining)

    def run_one_frame(self) -> None:
        """Process input, update every scene and draw the frame."""
        self._quit = not InputManager.instance().process_input()
        SceneManager.instance().update()
        Renderer.instance().render()

    def close(self) -> None:
        """Release the renderer and window and shut down."""
        if self._closed:
            return
        self._closed = True
        Renderer.instance().destroy()
        pygame.display.quit()
        pygame.quit()

    def __enter__(self) -> Minigin:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()