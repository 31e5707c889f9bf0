"""A red spiral whose winding slowly breathes over time."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from .scene import Color, Polygon

Point = Tuple[float, float]

_ORIGIN = (100.0, 300.0)
_RADIUS_STEP = 0.5
_SPIRAL_COLOR = Color(0xFF, 0x22, 0x20)


def spiral_vertices(elapsed: float, count: int = 200) -> List[Point]:
    """Vertices of the spiral at time ``elapsed`` seconds, centred on the origin."""
    angle_step = math.tau / (100.0 + math.sin(elapsed / 5.0) * 60)
    return [
        (i * _RADIUS_STEP * math.cos(i * angle_step), i * _RADIUS_STEP * math.sin(i * angle_step))
        for i in range(count)
    ]


@dataclass
class SpiralSketch:
    """Draws the spiral as a closed polygon on a white background."""

    width: int = 1024
    height: int = 768
    background: Color = field(default=Color(255, 255, 255), init=False)
    frame_rate: int = field(default=60, init=False)
    elapsed: float = field(default=0.0, init=False)

    def update(self, dt: float) -> None:
        self.elapsed += dt

    def draw(self) -> List[Polygon]:
        ox, oy = _ORIGIN
        points = tuple((x + ox, y + oy) for x, y in spiral_vertices(self.elapsed))
        return [Polygon(points, _SPIRAL_COLOR, filled=True, closed=True)]