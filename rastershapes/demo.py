"""
Shape drawing demo.

Build a scene of shapes, rasterize it onto a blank canvas and save the
result as an image (and optionally an animated GIF, one frame per shape).

Usage (CLI):
    python -m rastershapes.demo --seed 7 --save-path outputs/image.png
    python -m rastershapes.demo --random-shapes 40 --gif outputs/build.gif

Or from a notebook:
    from rastershapes.demo import draw_scene
    image = draw_scene(1000, 1000, seed=7)
"""

import argparse

from rastershapes.config import CANVAS_PRESETS, DEFAULT_NUM_CIRCLES, DEFAULT_SAVE_PATH
from rastershapes.image import Image
from rastershapes.render import render, render_frames, save_gif
from rastershapes.shapes import default_scene, make_rng, random_scene


def draw_scene(
    width,
    height,
    seed=None,
    num_circles=DEFAULT_NUM_CIRCLES,
    random_shapes=0,
    save_path=DEFAULT_SAVE_PATH,
    gif_path=None,
    progress=False,
):
    """Render a scene and save it.

    Parameters
    ----------
    width, height : int
        Canvas size in pixels.
    seed : int or None
        Seed for the random generator.  None draws a different scene each run.
    num_circles : int
        Number of random circles in the default scene.
    random_shapes : int
        If > 0, draw this many uniformly chosen random shapes instead of the
        default scene.
    save_path : str
        Where to save the final image.
    gif_path : str or None
        If given, also save an animated GIF with one frame per shape.
    progress : bool
        Show a progress bar while drawing.

    Returns
    -------
    Image
        The rendered canvas.
    """
    rng = make_rng(seed)
    if random_shapes > 0:
        shapes = random_scene(width, height, random_shapes, rng)
    else:
        shapes = default_scene(width, height, rng, num_circles)

    image = Image.blank(width, height)
    if gif_path:
        save_gif(render_frames(shapes, image), gif_path)
        print(f"Build animation saved to {gif_path} ({len(shapes)} frames)")
    else:
        render(shapes, image, progress=progress)

    image.save(save_path)
    print(f"Image saved to {save_path} ({len(shapes)} shapes)")
    return image


def main(argv=None):
    p = argparse.ArgumentParser(description="Rasterize random geometric shapes")
    p.add_argument("--preset", choices=sorted(CANVAS_PRESETS), default="large")
    p.add_argument("--width", type=int, default=None, help="Override preset width")
    p.add_argument("--height", type=int, default=None, help="Override preset height")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--num-circles", type=int, default=DEFAULT_NUM_CIRCLES)
    p.add_argument("--random-shapes", type=int, default=0,
                   help="Draw N random shapes instead of the default scene")
    p.add_argument("--save-path", default=DEFAULT_SAVE_PATH)
    p.add_argument("--gif", default=None, help="Also save a per-shape GIF here")
    p.add_argument("--progress", action="store_true")
    args = p.parse_args(argv)

    preset = CANVAS_PRESETS[args.preset]
    return draw_scene(
        args.width or preset.width,
        args.height or preset.height,
        seed=args.seed,
        num_circles=args.num_circles,
        random_shapes=args.random_shapes,
        save_path=args.save_path,
        gif_path=args.gif,
        progress=args.progress,
    )


if __name__ == "__main__":
    main()
