import math

import pytest

from sketchbook.scene import Color
from sketchbook.spiral import SpiralSketch, spiral_vertices


def test_default_vertex_count():
    assert len(spiral_vertices(0.0)) == 200


def test_first_vertex_at_origin():
    assert spiral_vertices(3.0)[0] == (0.0, 0.0)


def test_radius_grows_by_half_each_step():
    for i, (x, y) in enumerate(spiral_vertices(7.0, 50)):
        assert math.hypot(x, y) == pytest.approx(0.5 * i)


def test_quarter_turn_at_time_zero():
    x, y = spiral_vertices(0.0)[25]
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(12.5)


def test_sketch_polygon_is_translated_and_red():
    sketch = SpiralSketch()
    sketch.update(2.0)
    (poly,) = sketch.draw()
    assert poly.points[0] == (100.0, 300.0)
    assert poly.color == Color(0xFF, 0x22, 0x20)
    assert poly.closed
    raw = spiral_vertices(2.0)
    assert poly.points[10] == pytest.approx((raw[10][0] + 100, raw[10][1] + 300))


def test_sketch_background_white():
    assert SpiralSketch().background == Color(255, 255, 255)


def test_shape_changes_with_time():
    sketch = SpiralSketch()
    first = sketch.draw()[0].points
    sketch.update(10.0)
    assert sketch.draw()[0].points[50] != pytest.approx(first[50])