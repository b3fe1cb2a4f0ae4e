from unittest import mock

import pygame

from minigin.input_manager import InputManager


def events(*types):
    return lambda: [pygame.event.Event(t) for t in types]


def _recording_poll(seen, types):
    def poll():
        return (_record(seen, t) for t in types)

    return poll


def _record(seen, event_type):
    seen.append(event_type)
    return pygame.event.Event(event_type)


def test_no_events_keeps_running():
    assert InputManager(events()).process_input() is True


def test_quit_event_stops():
    assert InputManager(events(pygame.QUIT)).process_input() is False


def test_key_and_mouse_events_keep_running():
    manager = InputManager(events(pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN))
    assert manager.process_input() is True


def test_quit_after_other_events_stops():
    manager = InputManager(events(pygame.KEYDOWN, pygame.QUIT))
    assert manager.process_input() is False


def test_quit_stops_before_later_events_are_read():
    seen = []
    poll = _recording_poll(seen, (pygame.QUIT, pygame.KEYDOWN))
    assert InputManager(poll).process_input() is False
    assert seen == [pygame.QUIT]


def test_default_source_is_pygame_event_queue():
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]) as get:
        assert InputManager().process_input() is False
    assert get.call_count == 1