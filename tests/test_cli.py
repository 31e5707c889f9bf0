import pytest

from sketchbook.boxes import BoxesSketch
from sketchbook.cli import build_sketch, main
from sketchbook.limit import LimitSketch
from sketchbook.spiral import SpiralSketch


def test_build_boxes_has_source_count():
    sketch = build_sketch("boxes", 100, 50, 1)
    assert isinstance(sketch, BoxesSketch)
    assert len(sketch.boxes) == 5500
    assert sketch.width == 100


def test_build_boxes_seed_is_reproducible():
    first = build_sketch("boxes", 100, 50, 7)
    second = build_sketch("boxes", 100, 50, 7)
    assert first.boxes == second.boxes


def test_build_limit_uses_size():
    sketch = build_sketch("limit", 200, 80)
    assert isinstance(sketch, LimitSketch)
    assert sketch.axis_y == 40.0
    assert sketch.math_to_screen_x(2.0) == 200.0


def test_build_spiral():
    sketch = build_sketch("spiral", 64, 48)
    assert isinstance(sketch, SpiralSketch)
    assert (sketch.width, sketch.height) == (64, 48)


def test_build_unknown_name():
    with pytest.raises(ValueError):
        build_sketch("nothing")


def test_build_rejects_bad_size():
    with pytest.raises(ValueError):
        build_sketch("spiral", 0, 10)


def test_main_runs_frames(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    argv = ["limit", "--width", "64", "--height", "48", "--frames", "2", "--images", str(tmp_path)]
    assert main(argv) == 0


def test_main_rejects_unknown_sketch():
    with pytest.raises(SystemExit) as info:
        main(["nothing"])
    assert info.value.code == 2


def test_main_rejects_negative_frames(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with pytest.raises(SystemExit) as info:
        main(["spiral", "--frames", "-1"])
    assert info.value.code == 2