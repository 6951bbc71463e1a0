#!/usr/bin/env python3
"""
Live-adjustable rate configuration.

RateSettings is shared by reference between the control panel (which writes it
from slider callbacks) and the main loop (which reads it every frame). Both run on
the same thread, so no locking is needed. Zero rates are legal values: the sliders
start at 0, and the getters below turn them into safe durations.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .constants import (
    DEFAULT_FRAME_CAP,
    DEFAULT_TICK_RATE,
    FRAME_CAP_MAX,
    MIN_POLL_TIMEOUT_MS,
    TICK_RATE_MAX,
)
from .utils import clamp

logger = logging.getLogger(__name__)


@dataclass
class RateSettings:
    frame_cap: int = DEFAULT_FRAME_CAP  # max frames (input polls) per second
    tick_rate: int = DEFAULT_TICK_RATE  # physics ticks per second

    def set_frame_cap(self, value) -> None:
        self.frame_cap = int(clamp(int(value), 0, FRAME_CAP_MAX))
        logger.debug("Frame cap set to %d", self.frame_cap)

    def set_tick_rate(self, value) -> None:
        self.tick_rate = int(clamp(int(value), 0, TICK_RATE_MAX))
        if self.paused:
            logger.debug("Tick rate is 0, physics paused")

    @property
    def paused(self) -> bool:
        return self.tick_rate <= 0

    def tick_duration_ms(self) -> Optional[float]:
        """Length of one physics tick, or None while physics is paused."""
        if self.paused:
            return None
        return 1000.0 / self.tick_rate

    def poll_timeout_ms(self) -> int:
        """Input wait per frame; never below MIN_POLL_TIMEOUT_MS."""
        if self.frame_cap <= 0:
            return MIN_POLL_TIMEOUT_MS
        return max(MIN_POLL_TIMEOUT_MS, 1000 // self.frame_cap)
