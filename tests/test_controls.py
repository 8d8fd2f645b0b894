from __future__ import annotations

import pygame
import pytest

from scrollgame.controls import KeyboardInput
from scrollgame.utils import Direction


@pytest.fixture
def keyboard():
    pygame.init()
    pygame.display.set_mode((10, 10))
    pygame.event.clear()
    yield KeyboardInput()
    pygame.quit()


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_no_input_means_no_direction(keyboard: KeyboardInput) -> None:
    assert keyboard.poll_direction() is Direction.NONE


def test_last_press_before_poll_wins(keyboard: KeyboardInput) -> None:
    keyboard.handle_event(_key(pygame.K_UP))
    keyboard.handle_event(_key(pygame.K_DOWN))
    assert keyboard.poll_direction() is Direction.DOWN
    assert keyboard.poll_direction() is Direction.NONE


def test_unrecognized_keys_are_ignored(keyboard: KeyboardInput) -> None:
    keyboard.handle_event(_key(pygame.K_UP))
    keyboard.handle_event(_key(pygame.K_a))
    keyboard.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_DOWN))
    assert keyboard.poll_direction() is Direction.UP
    assert not keyboard.closed


def test_events_are_read_from_queue(keyboard: KeyboardInput) -> None:
    pygame.event.post(_key(pygame.K_DOWN))
    assert keyboard.poll_direction() is Direction.DOWN


def test_quit_and_escape_close_input(keyboard: KeyboardInput) -> None:
    keyboard.handle_event(pygame.event.Event(pygame.QUIT))
    assert keyboard.closed

    other = KeyboardInput()
    other.handle_event(_key(pygame.K_ESCAPE))
    assert other.closed


def test_custom_key_mapping() -> None:
    keyboard = KeyboardInput({pygame.K_w: Direction.UP})
    keyboard.handle_event(_key(pygame.K_UP))
    assert keyboard.pending is Direction.NONE
    keyboard.handle_event(_key(pygame.K_w))
    assert keyboard.pending is Direction.UP
