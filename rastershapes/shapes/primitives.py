"""
Primitive shapes: points, lines and circles.

All shapes are frozen dataclasses.  Randomized constructors take an
explicit numpy ``Generator`` so that a seeded generator reproduces the same
shapes; when none is given a fresh, unseeded one is used.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from rastershapes.config import CIRCLE_RADIUS_MAX, CIRCLE_RADIUS_MIN, COLOR_CHANNEL_MAX
from rastershapes.image import Color
from rastershapes.raster import (
    circle_pixels, line_pixels,
    rasterize_circle, rasterize_line, rasterize_point,
)
from rastershapes.shapes._types import Drawable, make_rng, uniform_int


def random_color(rng) -> Color:
    """Opaque RGB colour with every channel uniform in [0, 255]."""
    return Color.rgb(
        uniform_int(rng, 0, COLOR_CHANNEL_MAX),
        uniform_int(rng, 0, COLOR_CHANNEL_MAX),
        uniform_int(rng, 0, COLOR_CHANNEL_MAX),
    )


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point(Drawable):
    x: int
    y: int

    @classmethod
    def random(cls, max_x: int, max_y: int, rng=None) -> "Point":
        """Point with x in [0, max_x] and y in [0, max_y], both inclusive."""
        rng = rng if rng is not None else make_rng()
        return cls(uniform_int(rng, 0, max_x), uniform_int(rng, 0, max_y))

    def __iter__(self):
        yield self.x
        yield self.y

    def pixels(self):
        yield self.x, self.y

    def draw(self, image):
        rasterize_point(image, self, self.color)


# ---------------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Line(Drawable):
    start: Point
    end: Point

    @classmethod
    def random(cls, max_x: int, max_y: int, rng=None) -> "Line":
        rng = rng if rng is not None else make_rng()
        return cls(Point.random(max_x, max_y, rng), Point.random(max_x, max_y, rng))

    def __len__(self) -> int:
        """Number of pixels the line writes."""
        return max(abs(self.end.x - self.start.x), abs(self.end.y - self.start.y)) + 1

    def pixels(self):
        return line_pixels(self.start.x, self.start.y, self.end.x, self.end.y)

    def draw(self, image):
        rasterize_line(image, self.start, self.end, self.color)


# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Circle(Drawable):
    """Circle outline with a random colour for every pixel.

    *rng* feeds the per-pixel colours; it is excluded from equality so two
    circles with the same centre and radius compare equal.
    """
    center: Point
    radius: int
    rng: Optional[np.random.Generator] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f"Circle radius must be non-negative, got {self.radius}")
        if self.rng is None:
            object.__setattr__(self, "rng", make_rng())

    @classmethod
    def at(cls, x: int, y: int, radius: int, rng=None) -> "Circle":
        return cls(Point(x, y), radius, rng)

    @classmethod
    def random(cls, limit_x: int, limit_y: int, rng=None) -> "Circle":
        """Random centre inside the limits, radius in [CIRCLE_RADIUS_MIN, CIRCLE_RADIUS_MAX]."""
        rng = rng if rng is not None else make_rng()
        center = Point.random(limit_x, limit_y, rng)
        radius = uniform_int(rng, CIRCLE_RADIUS_MIN, CIRCLE_RADIUS_MAX)
        return cls(center, radius, rng)

    def pixels(self):
        return circle_pixels(self.center.x, self.center.y, self.radius)

    def draw(self, image):
        rasterize_circle(image, self.center, self.radius, self.color)

    def color(self) -> Color:
        return random_color(self.rng)
