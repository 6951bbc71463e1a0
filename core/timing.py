#!/usr/bin/env python3
"""
Clock and fixed-timestep accumulator.

The render loop runs at whatever rate the input poll allows, while physics runs in
fixed ticks of 1000 / tick_rate milliseconds. Each frame the accumulator converts
the wall time since the previous frame, plus the sub-tick remainder carried from
earlier frames, into a whole number of ticks. The remainder is carried forward so
no time is lost over long runs; input can lag physics by up to one tick.

The clock is read once per frame.
"""
import math
import time
from typing import Callable, Optional


def _perf_counter_ms() -> int:
    return int(time.perf_counter() * 1000)


class Clock:
    """Monotonic millisecond clock. The source is injectable for tests."""

    def __init__(self, source: Optional[Callable[[], float]] = None):
        self._source = source or _perf_counter_ms

    def now(self) -> int:
        return int(self._source())


class TimeAccumulator:
    """
    Tracks time debt between variable-length frames and fixed-length ticks.

    Attributes:
        last_sample_time: clock reading taken at the previous frame (ms)
        carry_offset: elapsed time not yet consumed by a whole tick (ms), always in
            [0, tick_duration)
    """

    def __init__(self, start_time: int = 0):
        self.last_sample_time = start_time
        self.carry_offset = 0.0

    def reset(self, now: int) -> None:
        self.last_sample_time = now
        self.carry_offset = 0.0

    def advance(self, now: int, tick_duration_ms: Optional[float]) -> int:
        """
        Consume the time since the previous sample and return the ticks to run.

        A tick_duration_ms of None means physics is paused: no ticks run and the
        elapsed time is dropped rather than banked.
        """
        elapsed = (now - self.last_sample_time) + self.carry_offset
        self.last_sample_time = now

        if tick_duration_ms is None or tick_duration_ms <= 0:
            self.carry_offset = 0.0
            return 0

        ticks = int(math.floor(elapsed / tick_duration_ms))
        if ticks < 0:
            # Clock stepped backwards; wait for it to catch up
            self.carry_offset = 0.0
            return 0
        self.carry_offset = max(0.0, elapsed - ticks * tick_duration_ms)
        return ticks
