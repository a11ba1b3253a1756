"""
Global configuration: canvas presets and randomized-shape policy.

The circle radius bounds are the historical defaults of the demo and are
kept fixed so that randomized scenes stay comparable between runs.
"""

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Randomized shape policy
# ---------------------------------------------------------------------------

CIRCLE_RADIUS_MIN = 9
CIRCLE_RADIUS_MAX = 500
COLOR_CHANNEL_MAX = 255

# ---------------------------------------------------------------------------
# Canvas presets
# ---------------------------------------------------------------------------


@dataclass
class CanvasPreset:
    name: str
    width: int
    height: int


PRESET_LARGE = CanvasPreset(name="large", width=1000, height=1000)

PRESET_SMALL = CanvasPreset(name="small", width=256, height=256)

CANVAS_PRESETS = {"large": PRESET_LARGE, "small": PRESET_SMALL}

# ---------------------------------------------------------------------------
# Demo defaults
# ---------------------------------------------------------------------------

DEFAULT_NUM_CIRCLES = 50
DEFAULT_SAVE_PATH = "outputs/image.png"
GIF_FRAME_DURATION = 200     # milliseconds per frame
