"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable

from .singleton import Singleton


class Timer(Singleton):
    """Measures time since start and the duration of the last frame."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()
        self._t1 = self._start
        self._t2 = self._start
        self._delta = 0.0

    def lap(self) -> None:
        """Mark the end of a frame; the time since the previous lap becomes ``elapsed``."""
        self._t1 = self._t2
        self._t2 = self._clock()
        self._delta = self._t2 - self._t1

    def reset(self) -> None:
        """Restart from now, with no elapsed frame time."""
        now = self._clock()
        self._start = now
        self._t1 = now
        self._t2 = now
        self._delta = 0.0

    @property
    def elapsed(self) -> float:
        """Seconds between the last two laps."""
        return self._delta

    @property
    def total_elapsed(self) -> float:
        """Seconds since the timer was started or reset."""
        return self._clock() - self._start