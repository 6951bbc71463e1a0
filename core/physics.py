#!/usr/bin/env python3
"""
Simulation state for the DeltaTime simulator.

Responsibilities
- Own the ordered list of KinematicPoint objects; insertion order is the update and
  render order.
- Advance every point by one fixed tick (step).
- Apply the keyboard commands: bump (index-staggered velocity overwrite) and spawn.

Resource note
- Points are never removed. Each spawn costs one point plus one history buffer and
  the collection grows without bound for as long as the process runs. A warning is
  logged each time the count doubles past POINT_COUNT_WARNING; nothing is evicted.

Threading
- Single-threaded. All mutation happens on the main loop between frames.
"""
import logging
from typing import List, Optional, Tuple

from .constants import (
    BUMP_BASE,
    DEFAULT_ACCELERATION,
    DEFAULT_DISPLACEMENT,
    DEFAULT_POINT_COLOR,
    DEFAULT_VELOCITY,
    POINT_COUNT_WARNING,
)
from .data_models import KinematicPoint, PointSnapshot

logger = logging.getLogger(__name__)


def make_default_point(color: Tuple[int, int, int] = DEFAULT_POINT_COLOR) -> KinematicPoint:
    """Point with the shared start-up kinematics (v=8, s=20, a=-0.0981)."""
    return KinematicPoint(
        velocity=DEFAULT_VELOCITY,
        displacement=DEFAULT_DISPLACEMENT,
        acceleration=DEFAULT_ACCELERATION,
        color=tuple(color),
    )


class Simulation:
    """
    Ordered collection of points advanced in fixed ticks.

    Ticks are counted so the main loop can report them; the count has no effect on
    the physics.
    """

    def __init__(self, points: Optional[List[KinematicPoint]] = None):
        self.points: List[KinematicPoint] = list(points) if points is not None else []
        self.tick_count = 0
        self._next_warning = POINT_COUNT_WARNING

    def __len__(self) -> int:
        return len(self.points)

    def step(self) -> None:
        """Integrate every point once, in insertion order."""
        for p in self.points:
            p.integrate()
        self.tick_count += 1

    def bump(self, direction: bool) -> None:
        """Set point i's velocity to (i if direction else -i) + BUMP_BASE."""
        for i, p in enumerate(self.points):
            p.apply_impulse((i if direction else -i) + BUMP_BASE)
        logger.debug("Bumped %d points %s", len(self.points), "up" if direction else "down")

    def spawn(self, color: Tuple[int, int, int]) -> KinematicPoint:
        """Append a point with the default kinematics and the given color."""
        point = make_default_point(color)
        self.points.append(point)
        n = len(self.points)
        logger.info("Spawned point #%d with color %s", n, point.color)
        if n >= self._next_warning:
            logger.warning("Point count reached %d; points are never removed", n)
            self._next_warning *= 2
        return point

    def snapshot(self) -> List[PointSnapshot]:
        """Immutable per-point state for the renderer."""
        return [p.snapshot() for p in self.points]
