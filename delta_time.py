#!/usr/bin/env python3
"""
DeltaTime application entry point: fixed-timestep bouncing points with trails.

What this module does
- Opens a Pygame viewport that shows the points, their trails and velocity indicators.
- Opens a Dear PyGui control panel with FrameRate and TickRate sliders.
- Runs one MainLoop that advances physics in fixed ticks, independent of the frame rate.

Threading model
- Single thread. Dear PyGui is driven with its manual render loop (one
  render_dearpygui_frame() per main-loop frame), so slider callbacks run between
  frames and write RateSettings directly.

Keys (viewport window focused)
- w / s: bump every point up / down (point i gets velocity +/-i + 3)
- Space: add a point with a random color
- any other key, or closing either window: quit

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python delta_time.py`
"""
import logging
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import dearpygui.dearpygui as dpg
import pygame

from core.constants import (
    CONTROLS_TITLE,
    FRAME_CAP_MAX,
    LOG_FORMAT,
    LOG_LEVEL,
    OUTPUT_SCALE,
    TICK_RATE_MAX,
)
from core.input import KeyboardInput
from core.loop import MainLoop
from core.physics import Simulation, make_default_point
from core.rendering import PygameRenderer
from core.settings import RateSettings

logger = logging.getLogger("delta_time")


class ControlPanel:
    """
    Dear PyGui window holding the rate sliders and a small status readout.
    """
    def __init__(self, settings: RateSettings, simulation: Simulation):
        self.settings = settings
        self.simulation = simulation
        self.status_id = None
        self._build_ui()

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title=CONTROLS_TITLE, width=420, height=160, vsync=False)

        with dpg.window(label="Controls", width=400, height=140, pos=(10, 10), tag="main_window"):
            dpg.add_slider_int(label="FrameRate", min_value=0, max_value=FRAME_CAP_MAX,
                               default_value=self.settings.frame_cap, width=260,
                               callback=lambda s, a, u: self.settings.set_frame_cap(a), tag="frame_cap_slider")
            dpg.add_slider_int(label="TickRate", min_value=0, max_value=TICK_RATE_MAX,
                               default_value=self.settings.tick_rate, width=260,
                               callback=lambda s, a, u: self.settings.set_tick_rate(a), tag="tick_rate_slider")
            dpg.add_separator()
            self.status_id = dpg.add_text("")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    def pump(self) -> bool:
        """Render one panel frame. False once the panel window has been closed."""
        if not dpg.is_dearpygui_running():
            return False
        dpg.set_value(self.status_id,
                      f"Points: {len(self.simulation)}   Ticks: {self.simulation.tick_count}")
        # vsync is off: the input poll paces frames, not the monitor refresh
        dpg.render_dearpygui_frame()
        return True

    def close(self):
        dpg.destroy_context()


def build_default_scene() -> Simulation:
    # One green point, as at start-up in every run
    return Simulation([make_default_point()])


def main():
    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO), format=LOG_FORMAT)

    settings = RateSettings()
    simulation = build_default_scene()

    panel = None
    pygame.init()
    try:
        renderer = PygameRenderer(OUTPUT_SCALE)
        renderer.open()
        logger.info("Viewport opened at %dx%d", OUTPUT_SCALE, OUTPUT_SCALE)

        panel = ControlPanel(settings, simulation)
        loop = MainLoop(simulation, settings, renderer, KeyboardInput(), controls=panel)
        loop.run()
    finally:
        if panel is not None:
            panel.close()
        pygame.quit()


if __name__ == "__main__":
    main()
