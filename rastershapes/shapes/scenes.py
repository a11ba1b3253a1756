"""
Scene builders: ordered lists of shapes ready to be rendered.

``default_scene`` is the classic demo composition (a random line and point,
a fixed rectangle and triangle, then a batch of random circles).
"""

from typing import List

from rastershapes.config import DEFAULT_NUM_CIRCLES
from rastershapes.shapes._types import Drawable, make_rng, uniform_int
from rastershapes.shapes.polygons import Rectangle, Triangle
from rastershapes.shapes.primitives import Circle, Line, Point

SHAPE_TYPES = (Point, Line, Triangle, Rectangle, Circle)


def random_shape(max_x: int, max_y: int, rng=None) -> Drawable:
    """Pick a shape type uniformly and build a random instance of it."""
    rng = rng if rng is not None else make_rng()
    shape_type = SHAPE_TYPES[uniform_int(rng, 0, len(SHAPE_TYPES) - 1)]
    return shape_type.random(max_x, max_y, rng)


def default_scene(width: int, height: int, rng=None,
                  num_circles: int = DEFAULT_NUM_CIRCLES) -> List[Drawable]:
    rng = rng if rng is not None else make_rng()
    shapes = [
        Line.random(width, height, rng),
        Point.random(width, height, rng),
        Rectangle(Point(150, 300), Point(50, 60)),
        Triangle(Point(500, 500), Point(250, 700), Point(700, 800)),
    ]
    shapes.extend(Circle.random(width, height, rng) for _ in range(num_circles))
    return shapes


def random_scene(width: int, height: int, num_shapes: int, rng=None) -> List[Drawable]:
    rng = rng if rng is not None else make_rng()
    return [random_shape(width, height, rng) for _ in range(num_shapes)]
