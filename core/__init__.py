"""
Core of the DeltaTime simulator: fixed-timestep physics, trail history, timing,
rendering and input. The application entry point is delta_time.py.
"""

__version__ = "0.1.0"
