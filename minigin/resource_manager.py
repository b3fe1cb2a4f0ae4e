"""Loads and caches textures and fonts from the data directory."""

from __future__ import annotations

import operator
import os
import weakref
from pathlib import Path
from typing import Dict, FrozenSet, Hashable, Tuple, TypeVar, Union

import pygame

from .font import Font
from .singleton import Singleton
from .texture import Texture2D

PathLike = Union[str, "os.PathLike[str]"]
_K = TypeVar("_K", bound=Hashable)
_V = TypeVar("_V")


class ResourceManager(Singleton):
    """Caches loaded resources by file name (and size, for fonts)."""

    def __init__(self) -> None:
        self._data_path = Path()
        self._textures: Dict[str, Texture2D] = {}
        self._fonts: Dict[Tuple[str, int], Font] = {}

    def init(self, data_path: PathLike) -> None:
        """Set the directory resources are loaded from and enable font support."""
        self._data_path = Path(data_path)
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise RuntimeError(f"Failed to load support for fonts: {exc}") from exc

    @property
    def data_path(self) -> Path:
        """Directory resources are loaded from."""
        return self._data_path

    @property
    def loaded_textures(self) -> FrozenSet[str]:
        """Keys of the cached textures."""
        return frozenset(self._textures)

    @property
    def loaded_fonts(self) -> FrozenSet[Tuple[str, int]]:
        """Keys of the cached fonts."""
        return frozenset(self._fonts)

    def load_texture(self, file: PathLike) -> Texture2D:
        """Return the texture for ``file``, loading it on first request."""
        full_path = self._data_path / file
        key = full_path.name
        texture = self._textures.get(key)
        if texture is None:
            texture = Texture2D.from_file(full_path)
            self._textures[key] = texture
        return texture

    def load_font(self, file: PathLike, size: int) -> Font:
        """Return the font for ``file`` at ``size`` (0-255), loading it on first request."""
        size = operator.index(size)
        if not 0 <= size <= 255:
            raise ValueError(f"font size must be between 0 and 255, got {size}")
        full_path = self._data_path / file
        key = (full_path.name, size)
        font = self._fonts.get(key)
        if font is None:
            font = Font(full_path, size)
            self._fonts[key] = font
        return font

    def unload_unused_resources(self) -> None:
        """Drop every cached resource that nothing else refers to."""
        self._drop_unreferenced(self._textures)
        self._drop_unreferenced(self._fonts)

    @staticmethod
    def _drop_unreferenced(cache: Dict[_K, _V]) -> None:
        survivors: weakref.WeakValueDictionary = weakref.WeakValueDictionary(cache)
        cache.clear()
        cache.update(survivors.items())