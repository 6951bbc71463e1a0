#!/usr/bin/env python3
"""
Main loop: Clock -> Simulation -> Renderer -> controls -> Input, once per frame.

Each frame
1. Read the clock once and let the accumulator turn elapsed time into whole ticks.
2. Run Simulation.step() that many times (0, 1 or many).
3. Render once, from an immutable snapshot.
4. Pump the control panel, if any; a closed panel ends the loop.
5. Poll input for up to 1000 / frame_cap ms (this wait paces the frames).
6. Dispatch the command: bump, spawn, no-op, or quit.

The collaborators are duck-typed so tests can substitute fakes:
- renderer.draw(snapshots, status_lines)
- input_controller.poll(timeout_ms) -> Command
- controls.pump() -> bool (False once the panel has been closed)
"""
import logging
import random
from typing import List, Optional

from .input import Command
from .physics import Simulation
from .settings import RateSettings
from .timing import Clock, TimeAccumulator
from .utils import random_color

logger = logging.getLogger(__name__)


class MainLoop:
    def __init__(self, simulation: Simulation, settings: RateSettings, renderer, input_controller,
                 clock: Optional[Clock] = None, controls=None, rng: Optional[random.Random] = None):
        self.simulation = simulation
        self.settings = settings
        self.renderer = renderer
        self.input = input_controller
        self.clock = clock or Clock()
        self.controls = controls
        self.rng = rng or random.Random()
        self.accumulator = TimeAccumulator(self.clock.now())
        self.running = True
        self.frame_count = 0
        self.last_ticks = 0

    def status_lines(self) -> List[str]:
        s = self.settings
        rate = "paused" if s.paused else f"{s.tick_rate}/s"
        return [
            f"Tick rate: {rate}  Frame cap: {s.frame_cap}  Points: {len(self.simulation)}",
            f"Ticks last frame: {self.last_ticks}  Total ticks: {self.simulation.tick_count}",
            "w/s: bump up/down | Space: add point | any other key: quit",
        ]

    def run_frame(self) -> bool:
        """Run one frame. Returns False once the loop should stop."""
        ticks = self.accumulator.advance(self.clock.now(), self.settings.tick_duration_ms())
        for _ in range(ticks):
            self.simulation.step()
        self.last_ticks = ticks
        logger.debug("Frame %d ran %d ticks", self.frame_count, ticks)

        self.renderer.draw(self.simulation.snapshot(), self.status_lines())
        self.frame_count += 1

        if self.controls is not None and not self.controls.pump():
            self.running = False
            return False

        command = self.input.poll(self.settings.poll_timeout_ms())
        return self.dispatch(command)

    def dispatch(self, command: Command) -> bool:
        if command is Command.BUMP_UP:
            self.simulation.bump(True)
        elif command is Command.BUMP_DOWN:
            self.simulation.bump(False)
        elif command is Command.SPAWN:
            self.simulation.spawn(random_color(self.rng))
        elif command is Command.QUIT:
            logger.info("Quit requested")
            self.running = False
        return self.running

    def run(self) -> None:
        self.accumulator.reset(self.clock.now())
        logger.info("Main loop started: tick rate %d/s, frame cap %d",
                    self.settings.tick_rate, self.settings.frame_cap)
        while self.running and self.run_frame():
            pass
        logger.info("Main loop stopped after %d frames, %d ticks",
                    self.frame_count, self.simulation.tick_count)
