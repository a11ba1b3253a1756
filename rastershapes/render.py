"""
Rendering driver: draw an ordered list of shapes onto one shared image.

Each shape's ``draw`` runs to completion before the next one starts.
"""

import os

from tqdm import tqdm

from rastershapes.config import GIF_FRAME_DURATION


def render(shapes, image, progress=False):
    """Draw *shapes* in order onto *image* and return it."""
    iterator = tqdm(shapes, desc="Drawing", unit="shape") if progress else shapes
    for shape in iterator:
        shape.draw(image)
    return image


def render_frames(shapes, image):
    """Draw *shapes* one by one, yielding an RGB Pillow snapshot after each."""
    for shape in shapes:
        shape.draw(image)
        yield image.to_pil().convert("RGB")


def save_gif(frames, path, duration=GIF_FRAME_DURATION):
    frames = list(frames)
    if not frames:
        raise ValueError("No frames to save")
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    frames[0].save(path, save_all=True, append_images=frames[1:],
                   duration=duration, loop=0)
    return path
