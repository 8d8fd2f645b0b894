"""Keyboard input collaborator."""

from __future__ import annotations

import pygame

from .utils import Direction


DEFAULT_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class KeyboardInput:
    """Single-slot keyboard reader: the last arrow press before a poll wins."""

    def __init__(self, keys: dict[int, Direction] | None = None) -> None:
        self.keys = dict(DEFAULT_KEYS if keys is None else keys)
        self.pending = Direction.NONE
        self.closed = False

    def handle_event(self, event: pygame.event.Event) -> None:
        """Record a single pygame event."""
        if event.type == pygame.QUIT:
            self.closed = True
            return
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            self.closed = True
            return
        direction = self.keys.get(event.key)
        if direction is not None:
            self.pending = direction

    def poll_direction(self) -> Direction:
        """Drain queued events and return the latest direction, then reset it."""
        for event in pygame.event.get():
            self.handle_event(event)
        direction = self.pending
        self.pending = Direction.NONE
        return direction
