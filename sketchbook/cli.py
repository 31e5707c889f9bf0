"""Command line entry point that opens one of the sketches in a window."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence, Union

from .boxes import BoxesSketch
from .limit import LimitSketch
from .render import run
from .spiral import SpiralSketch

SKETCHES = ("boxes", "limit", "spiral")
_BOX_COUNT = 5500

AnySketch = Union[BoxesSketch, LimitSketch, SpiralSketch]


def build_sketch(
    name: str,
    width: int = 1024,
    height: int = 768,
    seed: Optional[int] = None,
) -> AnySketch:
    """Create the sketch called ``name`` for a window of the given size."""
    if width <= 0 or height <= 0:
        raise ValueError("window size must be positive")
    if name == "boxes":
        return BoxesSketch(width, height, _BOX_COUNT, random.Random(seed))
    if name == "limit":
        return LimitSketch(width, height)
    if name == "spiral":
        return SpiralSketch(width, height)
    raise ValueError(f"unknown sketch {name!r}; choose one of {', '.join(SKETCHES)}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sketchbook", description="Run an animated sketch.")
    parser.add_argument("sketch", choices=SKETCHES)
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=768)
    parser.add_argument("--seed", type=int, default=None, help="random seed for the boxes")
    parser.add_argument("--images", default=".", help="directory holding image files")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    try:
        sketch = build_sketch(args.sketch, args.width, args.height, args.seed)
        run(sketch, args.images, args.frames)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())