"""
Configuration & Global Constants
================================
This module serves as the central registry for numeric floors, default
rendering sizes and the colour scheme shared by the whole application.

Why is this file needed?
------------------------
1. Robustness: Every user-supplied denominator (tempo, arc duration, swing
   duration, step size) is clamped against one of the floors defined here, so
   degenerate input always yields a finite result instead of an exception.
2. Consistency: The renderer, the simulation pipeline and the command line
   adapter share the same colours and canvas defaults.

Exports:
    EPS (float): Generic positive floor for denominators.
    MIN_SWING_BEATS (float): Shortest accepted swing, in beats.
    MIN_STEP (float): Smallest accepted integration step, in seconds.
    MAX_STEPS (int): Upper bound of integration steps per run.
"""
# Numeric floors
EPS: float = 1e-9
MIN_SWING_BEATS: float = 0.1
MIN_STEP: float = 0.001
MAX_STEPS: int = 1_000_000

# Renderer defaults
DEFAULT_CANVAS_WIDTH: int = 640
DEFAULT_CANVAS_HEIGHT: int = 480
DEFAULT_PAD: float = 0.5
DEFAULT_GRID_STEP: float = 1.0
MARKER_RADIUS: float = 4.0
MAX_GRID_LINES: int = 2000

# Colours (CSS hex strings, understood by Qt and matplotlib alike)
GRID_COLOR: str = "#e5e7eb"
AXES_COLOR: str = "#9ca3af"
PLACEHOLDER_COLOR: str = "#9ca3af"
BACKGROUND_COLOR: str = "#ffffff"

COM_COLOR: str = "#374151"
MODEL_COLORS: dict[str, str] = {
    "ideal": "#10b981",
    "coriolis_only": "#a855f7",
    "full": "#ef4444",
}
