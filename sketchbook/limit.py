"""An animated illustration of the sequence 1/n converging to zero."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .scene import Circle, Color, Line, Picture, Rectangle, Shape

_POINT_INTERVAL = 0.3
_MAX_POINTS = 20
_EPSILON = 0.2
_FORMULA_POSITION = (20.0, 20.0)


def _rgba(r: int, g: int, b: int, alpha: float) -> Color:
    return Color(r, g, b).with_alpha(alpha)


@dataclass
class LimitSketch:
    """Axis, ticks, sequence points, an epsilon band and formula images over time."""

    width: int = 1024
    height: int = 768
    background: Color = field(default=Color(255, 255, 255), init=False)
    frame_rate: int = field(default=60, init=False)
    animation_time: float = field(default=0.0, init=False)
    min_x: float = field(default=-2.0, init=False)
    max_x: float = field(default=2.0, init=False)
    axis_y: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.axis_y = float(self.height // 2)

    def update(self, dt: float) -> None:
        self.animation_time += dt

    def math_to_screen_x(self, x: float) -> float:
        return (x - self.min_x) / (self.max_x - self.min_x) * self.width

    def visible_points(self) -> int:
        """How many terms of the sequence are on screen."""
        if self.animation_time < 5.0:
            return 0
        return min(_MAX_POINTS, int((self.animation_time - 5.0) / _POINT_INTERVAL))

    def _ticks(self, color: Color) -> List[Line]:
        axis = self.axis_y
        return [
            Line((sx, axis - 10), (sx, axis + 10), color)
            for sx in (self.math_to_screen_x(float(v)) for v in range(-2, 3))
        ]

    def _point_alpha(self, point_time: float, n: int) -> float:
        return min(255.0, (point_time - (n - 1) * _POINT_INTERVAL) / 0.6 * 255)

    def draw(self) -> List[Shape]:
        t = self.animation_time
        axis = self.axis_y
        shapes: List[Shape] = []

        if t < 3.0:
            length = (t / 3.0) * self.width
            shapes.append(Line((0.0, axis), (length, axis), _rgba(0, 0, 0, (t / 3.0) * 255)))
            return shapes

        shapes.append(Line((0.0, axis), (float(self.width), axis), Color(0, 0, 0)))

        tick_time = t - 3.0
        if tick_time < 2.0:
            shapes.extend(self._ticks(_rgba(0, 0, 0, (tick_time / 2.0) * 255)))
            return shapes
        shapes.extend(self._ticks(Color(0, 0, 0)))

        point_time = t - 5.0
        count = self.visible_points()
        for n in range(1, count + 1):
            alpha = self._point_alpha(point_time, n)
            shapes.append(
                Circle((self.math_to_screen_x(1.0 / n), axis - 15), 5, _rgba(255, 0, 0, alpha))
            )

        epsilon_alpha = min(255.0, (t - 6.5) / 1.5 * 255)
        if count >= 5:
            left = self.math_to_screen_x(-_EPSILON)
            right = self.math_to_screen_x(_EPSILON)
            band = (left, axis - 20, right - left, 40)
            shapes.append(Rectangle(*band, _rgba(0, 0, 255, epsilon_alpha * 0.2)))
            shapes.append(Rectangle(*band, _rgba(0, 0, 255, epsilon_alpha), filled=False))
            for n in range(1, count + 1):
                x = 1.0 / n
                alpha = self._point_alpha(point_time, n)
                color = _rgba(0, 255, 0, alpha) if x < _EPSILON else _rgba(255, 0, 0, alpha)
                shapes.append(Circle((self.math_to_screen_x(x), axis - 15), 5, color))

        if count >= 10:
            alpha = min(255.0, (t - 8.0) / 1.5 * 255)
            shapes.append(Picture("formula_full.png", _FORMULA_POSITION, _rgba(0, 0, 0, alpha)))
        elif count >= 5:
            shapes.append(
                Picture("formula_part2.png", _FORMULA_POSITION, _rgba(0, 0, 0, epsilon_alpha))
            )
        elif t >= 5.0:
            alpha = min(255.0, (t - 5.0) / 1.5 * 255)
            shapes.append(Picture("formula_part1.png", _FORMULA_POSITION, _rgba(0, 0, 0, alpha)))
        return shapes