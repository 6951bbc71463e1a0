#!/usr/bin/env python3
"""
General utilities for the DeltaTime simulator.
"""
import random
from typing import Optional, Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def random_color(rng: Optional[random.Random] = None) -> Tuple[int, int, int]:
    """Uniform random RGB tuple, each channel in 0..255."""
    rng = rng or random
    return (rng.randrange(256), rng.randrange(256), rng.randrange(256))
