#!/usr/bin/env python3
"""
Data models for the DeltaTime simulator.

This module defines the KinematicPoint dataclass mutated by the physics tick
and the PointSnapshot value handed to the renderer.

Units and usage
- displacement is the height above the bottom edge in pixels, velocity is pixels per
  tick and acceleration pixels per tick^2. There is no dt: one tick is one time unit.
- history stores one rounded displacement per tick for drawing the trail.
- Snapshots are immutable copies; the renderer never sees live point state.
"""
from dataclasses import dataclass, field
from typing import Tuple

from .constants import FLOOR_LEVEL, RESTITUTION
from .history import HistoryBuffer


@dataclass(frozen=True)
class PointSnapshot:
    """Read-only view of one point at the end of the last physics tick."""
    velocity: float
    displacement: float
    color: Tuple[int, int, int]
    history: Tuple[int, ...]


@dataclass
class KinematicPoint:
    """
    A point moving vertically under constant acceleration above a bouncing floor.

    Fields:
    - velocity: signed speed, positive is up
    - displacement: height above the bottom edge, never below floor_level
    - acceleration: constant per point
    - color: RGB tuple used for the position marker
    - history: ring buffer of past displacements
    """
    velocity: float
    displacement: float
    acceleration: float
    color: Tuple[int, int, int] = (0, 255, 0)
    floor_level: float = FLOOR_LEVEL
    restitution: float = RESTITUTION
    history: HistoryBuffer = field(default_factory=HistoryBuffer)

    @property
    def write_cursor(self) -> int:
        return self.history.cursor

    def integrate(self) -> None:
        """Advance one tick: accelerate, move, bounce off the floor, record."""
        self.velocity += self.acceleration
        self.displacement += self.velocity

        if self.displacement < self.floor_level:
            self.velocity = -self.velocity * self.restitution
            self.displacement = self.floor_level

        self.history.record(round(self.displacement))

    def apply_impulse(self, magnitude: float) -> None:
        """Overwrite the velocity (not additive)."""
        self.velocity = float(magnitude)

    def snapshot(self) -> PointSnapshot:
        return PointSnapshot(
            velocity=self.velocity,
            displacement=self.displacement,
            color=self.color,
            history=self.history.snapshot(),
        )
