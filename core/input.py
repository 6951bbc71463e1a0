#!/usr/bin/env python3
"""
Keyboard input for the DeltaTime viewport.

The poll doubles as the frame limiter: it blocks on the pygame event queue for at
most the configured timeout, returning early only for a key press or a window close.

Key map
- w: bump up, s: bump down, space: spawn a point
- any other key, or closing the window: quit
- nothing within the timeout: no-op
"""
import enum

import pygame


class Command(enum.Enum):
    NONE = "none"
    BUMP_UP = "bump_up"
    BUMP_DOWN = "bump_down"
    SPAWN = "spawn"
    QUIT = "quit"


_KEY_COMMANDS = {
    pygame.K_w: Command.BUMP_UP,
    pygame.K_s: Command.BUMP_DOWN,
    pygame.K_SPACE: Command.SPAWN,
}


def translate_key(key: int) -> Command:
    """Map a pygame key code to a command; unmapped keys quit."""
    return _KEY_COMMANDS.get(key, Command.QUIT)


class KeyboardInput:
    """Blocking, timeout-bounded reader of the pygame event queue."""

    def poll(self, timeout_ms: int) -> Command:
        deadline = pygame.time.get_ticks() + max(1, int(timeout_ms))
        while True:
            remaining = deadline - pygame.time.get_ticks()
            if remaining <= 0:
                return Command.NONE
            event = pygame.event.wait(remaining)
            if event.type == pygame.NOEVENT:
                return Command.NONE
            if event.type == pygame.QUIT:
                return Command.QUIT
            if event.type == pygame.KEYDOWN:
                return translate_key(event.key)
