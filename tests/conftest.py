"""
Pytest configuration and shared fixtures.
"""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest


class FakeClock:
    """Clock whose time only moves when a test advances it."""

    def __init__(self, start=0):
        self.time = start

    def __call__(self):
        return self.time

    def advance(self, ms):
        self.time += ms


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return random.Random(42)


@pytest.fixture
def three_point_sim():
    """Simulation with three default points."""
    from core.physics import Simulation, make_default_point
    return Simulation([make_default_point() for _ in range(3)])
