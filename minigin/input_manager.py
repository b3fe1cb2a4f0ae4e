"""Polls window events."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

import pygame

from .singleton import Singleton

EventSource = Callable[[], Iterable["pygame.event.Event"]]


class InputManager(Singleton):
    """Drains pending events and reports whether the program should keep running."""

    def __init__(self, poll: Optional[EventSource] = None) -> None:
        self._poll = poll

    def process_input(self) -> bool:
        """Handle pending events; return False once a quit request is seen."""
        poll = self._poll or pygame.event.get
        for event in poll():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                pass
            if event.type == pygame.MOUSEBUTTONDOWN:
                pass
        return True