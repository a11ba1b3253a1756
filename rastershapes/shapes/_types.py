"""Shared drawing contract and randomness helpers (avoids circular imports)."""

import numpy as np

from rastershapes.image import Color


def make_rng(seed=None):
    """Return a numpy ``Generator``; pass an int seed for reproducible shapes."""
    return np.random.default_rng(seed)


def uniform_int(rng, lo, hi):
    """Draw a uniform integer from the inclusive range [lo, hi]."""
    if hi < lo:
        raise ValueError(f"Empty random range [{lo}, {hi}]")
    return int(rng.integers(lo, hi, endpoint=True))


class Drawable:
    """Anything that can write itself into a ``display(x, y, color)`` buffer.

    Subclasses implement ``draw``.  ``color`` defaults to white; overriding
    it changes the colour of every pixel the shape writes, and the override
    is called again for each pixel rather than cached.
    """

    def draw(self, image):
        raise NotImplementedError

    def color(self):
        return Color.white()
