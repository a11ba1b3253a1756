"""
Composite shapes built from line segments.

Edges are drawn in the composite's own colour (white unless ``color`` is
overridden).  Pixels shared by adjacent edges are written once per edge.
"""

from dataclasses import dataclass
from typing import List

from rastershapes.raster import rasterize_polyline, rasterize_rectangle, rectangle_corners
from rastershapes.shapes._types import Drawable, make_rng
from rastershapes.shapes.primitives import Line, Point


@dataclass(frozen=True)
class Triangle(Drawable):
    point1: Point
    point2: Point
    point3: Point

    @classmethod
    def random(cls, max_x: int, max_y: int, rng=None) -> "Triangle":
        rng = rng if rng is not None else make_rng()
        return cls(*(Point.random(max_x, max_y, rng) for _ in range(3)))

    def vertices(self) -> List[Point]:
        return [self.point1, self.point2, self.point3]

    def edges(self) -> List[Line]:
        v = self.vertices()
        return [Line(v[i], v[(i + 1) % 3]) for i in range(3)]

    def draw(self, image):
        rasterize_polyline(image, self.vertices(), self.color, closed=True)


@dataclass(frozen=True)
class Rectangle(Drawable):
    """Axis-aligned rectangle given by any two opposite corners."""
    point1: Point
    point2: Point

    @classmethod
    def random(cls, max_x: int, max_y: int, rng=None) -> "Rectangle":
        rng = rng if rng is not None else make_rng()
        return cls(Point.random(max_x, max_y, rng), Point.random(max_x, max_y, rng))

    def corners(self) -> List[Point]:
        """point1, (point1.x, point2.y), point2, (point2.x, point1.y)."""
        return [Point(x, y) for x, y in rectangle_corners(self.point1, self.point2)]

    def edges(self) -> List[Line]:
        c = self.corners()
        return [Line(c[i], c[(i + 1) % 4]) for i in range(4)]

    def draw(self, image):
        rasterize_rectangle(image, self.point1, self.point2, self.color)
