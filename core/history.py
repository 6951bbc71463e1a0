#!/usr/bin/env python3
"""
Fixed-capacity trail history.

Each simulated point records one rounded displacement per physics tick. The
buffer is allocated once, zero-filled, and overwritten in place; the write
cursor always stays in [0, capacity).
"""
from typing import Iterator, List, Tuple

from .constants import HISTORY_LENGTH


class HistoryBuffer:
    """
    Ring buffer of integer samples.

    record() writes at the cursor and advances it modulo the capacity, so the
    slot under the cursor always holds the oldest sample. snapshot() walks the
    buffer forward from the cursor, giving oldest to newest.
    """

    def __init__(self, capacity: int = HISTORY_LENGTH):
        capacity = int(capacity)
        if capacity <= 0:
            raise ValueError(f"history capacity must be positive, got {capacity}")
        self._samples: List[int] = [0] * capacity
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return len(self._samples)

    @property
    def cursor(self) -> int:
        """Index the next sample will be written to."""
        return self._cursor

    def __len__(self) -> int:
        return self.capacity

    def record(self, value: int) -> None:
        """Write value at the cursor (overwriting the oldest sample) and advance."""
        self._samples[self._cursor] = int(value)
        self._cursor = (self._cursor + 1) % len(self._samples)

    def snapshot(self) -> Tuple[int, ...]:
        """Immutable copy of the samples, index 0 being the oldest retained."""
        c = self._cursor
        return tuple(self._samples[c:] + self._samples[:c])

    def __iter__(self) -> Iterator[int]:
        return iter(self.snapshot())
