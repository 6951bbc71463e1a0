#!/usr/bin/env python3
"""
Shared constants for the DeltaTime simulator.

Units: displacement and velocity are in output pixels, time is in
milliseconds, and one physics tick is the unit of simulated time (velocity is
pixels per tick, acceleration pixels per tick^2).
"""
import os

# Floor and bounce
FLOOR_LEVEL = 20  # px above the bottom edge; displacement never drops below this
RESTITUTION = 0.8  # fraction of speed kept after a floor bounce

# Output frame and trail history
OUTPUT_SCALE = 600  # output image is OUTPUT_SCALE x OUTPUT_SCALE
RESOLUTION = 6  # px per history subdivision
HISTORY_LENGTH = OUTPUT_SCALE // RESOLUTION

# Initial kinematics for every point (start and spawn)
DEFAULT_VELOCITY = 8.0
DEFAULT_DISPLACEMENT = 20.0
DEFAULT_ACCELERATION = -0.0981

# Bump impulse: point i gets (+/-i) + BUMP_BASE
BUMP_BASE = 3

# Rates (live-adjustable from the control panel)
DEFAULT_FRAME_CAP = 200
DEFAULT_TICK_RATE = 120
FRAME_CAP_MAX = 240
TICK_RATE_MAX = 200
MIN_POLL_TIMEOUT_MS = 1

# Point collection growth is never bounded; warn once per doubling past this
POINT_COUNT_WARNING = 64

# Rendering (RGB)
BACKGROUND_COLOR = (0, 0, 0)
HISTORY_COLOR = (255, 0, 0)
VELOCITY_COLOR = (255, 255, 0)
HUD_COLOR = (200, 200, 200)
DEFAULT_POINT_COLOR = (0, 255, 0)
VELOCITY_INDICATOR_SCALE = 10
HISTORY_MARK_RADIUS = 2
MARKER_RADIUS = 4

WINDOW_TITLE = "DeltaTime"
CONTROLS_TITLE = "DeltaTime - Controls"

# Logging
LOG_LEVEL = os.environ.get("DELTATIME_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
