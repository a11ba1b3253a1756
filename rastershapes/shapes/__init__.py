"""
Drawable shapes for rastershapes.

Every shape implements ``draw(image)`` and ``color()`` (see ``Drawable``) and
offers a ``random(max_x, max_y, rng=None)`` constructor.

Usage::

    from rastershapes.shapes import Circle, Point, make_rng
    Circle.random(640, 480, make_rng(0)).draw(image)
"""

from rastershapes.shapes._types import Drawable, make_rng, uniform_int  # noqa: F401
from rastershapes.shapes.primitives import Circle, Line, Point, random_color  # noqa: F401
from rastershapes.shapes.polygons import Rectangle, Triangle  # noqa: F401
from rastershapes.shapes.scenes import (  # noqa: F401
    SHAPE_TYPES, default_scene, random_scene, random_shape,
)
