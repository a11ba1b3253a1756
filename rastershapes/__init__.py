"""rastershapes - rasterize points, lines, triangles, rectangles and circles."""

from rastershapes.image import Color, Image
from rastershapes.shapes import Circle, Drawable, Line, Point, Rectangle, Triangle
