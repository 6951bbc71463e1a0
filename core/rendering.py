#!/usr/bin/env python3
"""
Pygame renderer for the DeltaTime simulator.

Per point, draws:
- the trail: one small circle per history sample, oldest on the left,
  spaced OUTPUT_SCALE / len(history) / 2 pixels apart
- a velocity indicator: a vertical segment from the point, 10x its velocity
- the point itself at mid-width, in its own color

Screen y grows downward, so world height h is drawn at OUTPUT_SCALE - h.
The renderer only reads PointSnapshot values and never touches simulation state.
"""
from typing import List, Optional, Sequence

import pygame

from .constants import (
    BACKGROUND_COLOR,
    HISTORY_COLOR,
    HISTORY_MARK_RADIUS,
    HUD_COLOR,
    MARKER_RADIUS,
    OUTPUT_SCALE,
    VELOCITY_COLOR,
    VELOCITY_INDICATOR_SCALE,
    WINDOW_TITLE,
)
from .data_models import PointSnapshot


class PygameRenderer:
    """
    Draws frames into an off-screen surface and presents them in a window.

    render() has no display dependency and can be used headless; open() and
    present() need an initialised pygame display.
    """

    def __init__(self, scale: int = OUTPUT_SCALE):
        self.scale = scale
        self.screen: Optional[pygame.Surface] = None
        self._font = None

    def open(self) -> None:
        pygame.display.set_caption(WINDOW_TITLE)
        self.screen = pygame.display.set_mode((self.scale, self.scale))

    def render(self, points: Sequence[PointSnapshot]) -> pygame.Surface:
        """Fresh black frame with every point drawn, in list order."""
        frame = pygame.Surface((self.scale, self.scale))
        frame.fill(BACKGROUND_COLOR)
        for p in points:
            self._draw_point(frame, p)
        return frame

    def _draw_point(self, surf: pygame.Surface, p: PointSnapshot) -> None:
        scale = self.scale
        history = p.history
        if history:
            spacing = int(scale / len(history) / 2)
            for i, sample in enumerate(history):
                pygame.draw.circle(surf, HISTORY_COLOR, (i * spacing, scale - sample),
                                   HISTORY_MARK_RADIUS, 1)

        x = scale // 2
        y = scale - int(p.displacement)
        tip = y - int(p.velocity) * VELOCITY_INDICATOR_SCALE
        pygame.draw.line(surf, VELOCITY_COLOR, (x, y), (x, tip), 2)
        pygame.draw.circle(surf, p.color, (x, y), MARKER_RADIUS)

    def present(self, frame: pygame.Surface, status_lines: Optional[List[str]] = None) -> None:
        """Blit the frame to the window, overlay the HUD and flip."""
        if self.screen is None:
            self.open()
        self.screen.blit(frame, (0, 0))
        for row, text in enumerate(status_lines or []):
            self.draw_text(text, 10, 10 + row * 20, HUD_COLOR)
        pygame.display.flip()

    def draw(self, points: Sequence[PointSnapshot], status_lines: Optional[List[str]] = None) -> None:
        self.present(self.render(points), status_lines)

    def draw_text(self, text: str, x: int, y: int, color) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont("consolas", 16)
        img = self._font.render(text, True, color)
        self.screen.blit(img, (x, y))
