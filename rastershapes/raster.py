"""
Low-level pixel generation for the drawable shapes.

The generators yield integer ``(x, y)`` coordinates in drawing order and know
nothing about colour or storage.  The ``rasterize_*`` helpers feed them into
any buffer exposing ``display(x, y, color)``.

*color* may be a ``Color`` or a zero-argument callable; a callable is invoked
again for every pixel written, which is how a shape whose colour changes on
each call (e.g. a randomly coloured circle) gets one colour per pixel.
"""


def _resolve(color):
    return color() if callable(color) else color


# ---------------------------------------------------------------------------
# Pixel generators
# ---------------------------------------------------------------------------

def line_pixels(x0, y0, x1, y1):
    """Yield the DDA pixels of the segment (x0, y0) -> (x1, y1), both ends included.

    Each step advances the major axis by one pixel and the minor axis by
    ``delta / steps``; real coordinates are truncated toward zero.  Exactly
    ``max(|dx|, |dy|) + 1`` pixels are produced, a zero-length segment
    giving the single start pixel.

    Step *i* is computed as ``start + i * delta / steps`` rather than by
    summing the increment *i* times.  Summed increments drift by float
    round-off and can stop one pixel short of the end; the product form
    always finishes on (x1, y1), at the cost of some intermediate pixels
    differing from the summed form.
    """
    dx = x1 - x0
    dy = y1 - y0
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        yield x0, y0
        return
    for i in range(steps + 1):
        # i = steps lands exactly on (x1, y1)
        yield int(x0 + i * dx / steps), int(y0 + i * dy / steps)


def octant_reflections(cx, cy, x, y):
    """Return the 8 symmetric images of offset (x, y) around (cx, cy)."""
    return [
        (cx + x, cy + y),
        (cx - x, cy + y),
        (cx + x, cy - y),
        (cx - x, cy - y),
        (cx + y, cy + x),
        (cx - y, cy + x),
        (cx + y, cy - x),
        (cx - y, cy - x),
    ]


def circle_pixels(cx, cy, radius):
    """Yield the outline of a circle with the integer midpoint algorithm.

    Eight points are produced per iteration (duplicates included where
    reflections coincide, e.g. on the axes or the diagonal).
    """
    x, y = 0, radius
    d = 3 - 2 * radius
    while x <= y:
        yield from octant_reflections(cx, cy, x, y)
        if d < 0:
            d += 4 * x + 6
        else:
            d += 4 * (x - y) + 10
            y -= 1
        x += 1


# ---------------------------------------------------------------------------
# Core primitives
# ---------------------------------------------------------------------------

def rasterize_point(img, p, color):
    x, y = p
    img.display(x, y, _resolve(color))
    return img


def rasterize_line(img, p1, p2, color):
    """Draw the DDA segment p1 -> p2."""
    (x0, y0), (x1, y1) = p1, p2
    for x, y in line_pixels(x0, y0, x1, y1):
        img.display(x, y, _resolve(color))
    return img


def rasterize_polyline(img, points, color, closed=False):
    """Draw connected line segments through a list of points."""
    n = len(points)
    segs = n if closed else n - 1
    for i in range(segs):
        rasterize_line(img, points[i], points[(i + 1) % n], color)
    return img


def rasterize_rectangle(img, corner1, corner2, color):
    """Draw an axis-aligned rectangle outline from two opposite corners."""
    return rasterize_polyline(img, rectangle_corners(corner1, corner2), color, closed=True)


def rasterize_circle(img, center, radius, color):
    """Draw a circle outline; a callable *color* is sampled once per pixel."""
    cx, cy = center
    for x, y in circle_pixels(cx, cy, radius):
        img.display(x, y, _resolve(color))
    return img


# ---------------------------------------------------------------------------
# Geometry helpers
# ---------------------------------------------------------------------------

def rectangle_corners(corner1, corner2):
    """Return the four corners in drawing order: c1, (x1, y2), c2, (x2, y1)."""
    (x1, y1), (x2, y2) = corner1, corner2
    return [(x1, y1), (x1, y2), (x2, y2), (x2, y1)]
