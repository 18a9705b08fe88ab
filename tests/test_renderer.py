"""Tests for the render loop."""

import logging
import math

import numpy as np
import pytest

from whitted.camera.camera import Camera
from whitted.core.color import BLACK
from whitted.core.transform import view_transform
from whitted.core.tuples import point, vector
from whitted.geometry.world import World
from whitted.renderer.raytracer import Renderer, render


@pytest.fixture
def camera():
    return Camera(11, 11, math.pi / 2,
                  view_transform(point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0),
                                 vector(0.0, 1.0, 0.0)))


class TestRender:
    def test_center_pixel(self, world, camera, approx_color):
        canvas = render(camera, world)
        assert (canvas.width, canvas.height) == (11, 11)
        assert approx_color(canvas.pixel_at(5, 5), 0.38066, 0.47583, 0.2855)

    def test_empty_world_renders_black(self, camera):
        canvas = Renderer().render(camera, World())
        assert not canvas.pixels.any()
        assert canvas.pixel_at(0, 0) == BLACK

    def test_rows_match_full_render(self, world, camera):
        renderer = Renderer(max_depth=3)
        full = renderer.render(camera, world)
        block = renderer.render_rows(camera, world, 4, 7)
        assert block.shape == (3, 11, 3)
        np.testing.assert_allclose(block, full.pixels[4:7])

    @pytest.mark.parametrize("start, stop", [(-1, 3), (5, 4), (0, 12)])
    def test_invalid_row_range(self, world, camera, start, stop):
        with pytest.raises(ValueError):
            Renderer().render_rows(camera, world, start, stop)

    def test_negative_depth_is_rejected(self):
        with pytest.raises(ValueError):
            Renderer(max_depth=-1)

    def test_zero_depth_is_allowed(self, world, camera, approx_color):
        canvas = Renderer(max_depth=0).render(camera, world)
        assert approx_color(canvas.pixel_at(5, 5), 0.38066, 0.47583, 0.2855)


class TestProgressAndCancellation:
    def test_progress_reports_every_row(self, world, camera):
        calls = []
        Renderer().render(camera, world, progress=lambda done, total: calls.append((done, total)))
        assert calls == [(y, 11) for y in range(1, 12)]

    def test_stop_returns_partial_canvas(self, world, camera, caplog):
        rows = []

        def should_stop():
            return len(rows) >= 2

        with caplog.at_level(logging.WARNING, logger="whitted.renderer.raytracer"):
            canvas = Renderer().render(camera, world,
                                       progress=lambda done, total: rows.append(done),
                                       should_stop=should_stop)
        assert rows == [1, 2]
        assert not canvas.pixels[2:].any()
        assert "stopped after 2 of 11 rows" in caplog.text
