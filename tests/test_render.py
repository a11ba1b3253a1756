"""Tests for scenes, the render driver and the demo entry point."""

import pytest

from rastershapes.demo import draw_scene, main
from rastershapes.image import Image
from rastershapes.render import render, render_frames, save_gif
from rastershapes.shapes import (
    SHAPE_TYPES, Circle, Line, Point, Rectangle, Triangle,
    default_scene, make_rng, random_scene, random_shape,
)


@pytest.fixture
def canvas():
    return Image(64, 64)


class TestScenes:
    def test_default_scene_composition(self):
        shapes = default_scene(1000, 1000, make_rng(0), num_circles=5)
        assert len(shapes) == 9
        assert isinstance(shapes[0], Line)
        assert isinstance(shapes[1], Point)
        assert shapes[2] == Rectangle(Point(150, 300), Point(50, 60))
        assert shapes[3] == Triangle(Point(500, 500), Point(250, 700), Point(700, 800))
        assert all(isinstance(s, Circle) for s in shapes[4:])

    def test_default_scene_reproducible(self):
        a = default_scene(500, 400, make_rng(11), num_circles=3)
        b = default_scene(500, 400, make_rng(11), num_circles=3)
        assert a == b

    def test_random_scene(self):
        shapes = random_scene(100, 100, 60, make_rng(5))
        assert len(shapes) == 60
        assert {type(s) for s in shapes} == set(SHAPE_TYPES)

    def test_random_shape_type(self):
        assert isinstance(random_shape(10, 10, make_rng(2)), SHAPE_TYPES)


class TestRender:
    def test_draws_all_shapes(self, canvas):
        shapes = [Point(1, 1), Line(Point(0, 10), Point(20, 10))]
        render(shapes, canvas)
        assert (1, 1) in canvas.painted()
        assert (20, 10) in canvas.painted()

    def test_progress_bar(self, canvas):
        render([Point(2, 2)], canvas, progress=True)
        assert canvas.painted() == {(2, 2)}

    def test_later_shapes_overwrite(self, canvas):
        render([Circle.at(10, 10, 0), Point(10, 10)], canvas)
        assert canvas.get_pixel(10, 10) == Point(0, 0).color()

    def test_frames_one_per_shape(self, canvas):
        shapes = random_scene(64, 64, 4, make_rng(1))
        frames = list(render_frames(shapes, canvas))
        assert len(frames) == 4
        assert frames[0].size == (64, 64)

    def test_save_gif(self, canvas, tmp_path):
        frames = render_frames([Point(1, 1), Point(2, 2)], canvas)
        path = save_gif(frames, str(tmp_path / "anim.gif"))
        assert (tmp_path / "anim.gif").exists()
        assert path.endswith("anim.gif")

    def test_save_gif_empty(self, tmp_path):
        with pytest.raises(ValueError):
            save_gif([], str(tmp_path / "empty.gif"))


class TestDemo:
    def test_draw_scene_saves_png(self, tmp_path):
        out = tmp_path / "scene.png"
        image = draw_scene(120, 90, seed=3, num_circles=2, save_path=str(out))
        assert out.exists()
        assert image.width == 120 and image.height == 90
        assert image.painted()

    def test_draw_scene_reproducible(self, tmp_path):
        a = draw_scene(80, 80, seed=9, random_shapes=5, save_path=str(tmp_path / "a.png"))
        b = draw_scene(80, 80, seed=9, random_shapes=5, save_path=str(tmp_path / "b.png"))
        assert (a.pixels == b.pixels).all()

    def test_main_cli(self, tmp_path, capsys):
        out = tmp_path / "cli.png"
        gif = tmp_path / "cli.gif"
        main(["--preset", "small", "--seed", "1", "--num-circles", "3",
              "--save-path", str(out), "--gif", str(gif)])
        assert out.exists()
        assert gif.exists()
        assert "Image saved" in capsys.readouterr().out
