"""
Image buffer collaborator.

Shapes only ever call ``display(x, y, color)``; anything with that method
can be drawn into.  ``Image`` is the default buffer: an RGBA ``uint8``
numpy array that silently drops writes outside its bounds, encoded and
decoded through OpenCV.
"""

import os
from dataclasses import dataclass
from typing import Protocol

import cv2
import numpy as np
from PIL import Image as PILImage


@dataclass(frozen=True)
class Color:
    """RGBA colour, each channel in [0, 255]."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Colour channel {name}={value} outside [0, 255]")

    @classmethod
    def rgb(cls, r, g, b):
        return cls(int(r), int(g), int(b))

    @classmethod
    def rgba(cls, r, g, b, a):
        return cls(int(r), int(g), int(b), int(a))

    @classmethod
    def white(cls):
        return cls(255, 255, 255)

    @classmethod
    def black(cls):
        return cls(0, 0, 0)

    def as_tuple(self):
        return (self.r, self.g, self.b, self.a)


class Displayable(Protocol):
    def display(self, x: int, y: int, color: Color) -> None:
        ...


class Image:
    """Mutable RGBA raster, indexed as ``pixels[y, x]``."""

    def __init__(self, width, height, background=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.background = background or Color.black()
        self.pixels = np.empty((self.height, self.width, 4), dtype=np.uint8)
        self.pixels[...] = self.background.as_tuple()

    @classmethod
    def blank(cls, width, height):
        return cls(width, height)

    # ------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def display(self, x, y, color):
        """Set pixel (x, y); coordinates outside the canvas are ignored."""
        if self.in_bounds(x, y):
            self.pixels[y, x] = color.as_tuple()

    def get_pixel(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return Color(*(int(c) for c in self.pixels[y, x]))

    def painted(self):
        """Return the set of (x, y) whose colour differs from the background."""
        bg = np.array(self.background.as_tuple(), dtype=np.uint8)
        ys, xs = np.where(np.any(self.pixels != bg, axis=-1))
        return {(int(x), int(y)) for x, y in zip(xs, ys)}

    def copy(self):
        other = Image(self.width, self.height, self.background)
        other.pixels = self.pixels.copy()
        return other

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def save(self, path):
        """Encode to *path*; the format follows the file extension."""
        path = str(path)
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        if os.path.splitext(path)[1].lower() in (".jpg", ".jpeg"):
            data = cv2.cvtColor(self.pixels, cv2.COLOR_RGBA2BGR)
        else:
            data = cv2.cvtColor(self.pixels, cv2.COLOR_RGBA2BGRA)
        try:
            ok = cv2.imwrite(path, data)
        except cv2.error as e:
            raise IOError(f"Cannot write image: {path}") from e
        if not ok:
            raise IOError(f"Cannot write image: {path}")
        return path

    @classmethod
    def load(cls, path):
        path = str(path)
        data = cv2.imread(path, cv2.IMREAD_UNCHANGED)
        if data is None:
            raise FileNotFoundError(f"Cannot read image: {path}")
        if data.ndim == 2:
            data = cv2.cvtColor(data, cv2.COLOR_GRAY2RGBA)
        elif data.shape[2] == 3:
            data = cv2.cvtColor(data, cv2.COLOR_BGR2RGBA)
        else:
            data = cv2.cvtColor(data, cv2.COLOR_BGRA2RGBA)
        img = cls(data.shape[1], data.shape[0])
        img.pixels = np.ascontiguousarray(data)
        return img

    def to_pil(self):
        return PILImage.fromarray(self.pixels)
