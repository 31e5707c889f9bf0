import random

import pytest

from sketchbook.boxes import Box, BoxesSketch
from sketchbook.scene import Color, Rectangle


def test_random_box_within_area_and_sized():
    rng = random.Random(1)
    for _ in range(200):
        box = Box.random(100, rng)
        assert 0 <= box.x < 100
        assert 0 <= box.y < 100
        assert (box.width, box.height) == (20, 20)
        assert all(0 <= c < 255 for c in (box.color.r, box.color.g, box.color.b))


def test_box_draw_is_rectangle():
    box = Box(3, 4, Color(1, 2, 3))
    assert box.draw() == Rectangle(3, 4, 20, 20, Color(1, 2, 3))


def test_default_sketch_has_5500_boxes():
    sketch = BoxesSketch(rng=random.Random(0))
    assert len(sketch.boxes) == 5500
    assert len(sketch.draw()) == 5500
    assert sketch.background == Color(0, 0, 0)
    assert sketch.frame_rate == 60


def test_y_uses_width_not_height():
    sketch = BoxesSketch(width=200, height=10, count=300, rng=random.Random(2))
    assert max(b.y for b in sketch.boxes) >= 10
    assert all(b.y < 200 for b in sketch.boxes)


def test_seeded_sketches_match():
    a = BoxesSketch(count=50, rng=random.Random(7))
    b = BoxesSketch(count=50, rng=random.Random(7))
    assert a.draw() == b.draw()


def test_update_does_not_move_boxes():
    sketch = BoxesSketch(count=10, rng=random.Random(3))
    before = sketch.draw()
    sketch.update(0.5)
    assert sketch.draw() == before
    assert sketch.elapsed == 0.5


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        BoxesSketch(count=-1)