"""Plain drawing primitives that sketches produce and renderers consume."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"colour component {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name} out of range: {value}")

    def with_alpha(self, alpha: float) -> Color:
        """Return this colour with ``alpha`` clamped to 0..255 and truncated."""
        return replace(self, a=int(max(0.0, min(255.0, float(alpha)))))


@dataclass(frozen=True)
class Line:
    """A straight line segment."""

    start: Point
    end: Point
    color: Color


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    center: Point
    radius: float
    color: Color
    filled: bool = True


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float
    color: Color
    filled: bool = True


@dataclass(frozen=True)
class Polygon:
    """A polygon through ``points``, filled with the even-odd rule."""

    points: Tuple[Point, ...]
    color: Color
    filled: bool = True
    closed: bool = True


@dataclass(frozen=True)
class Picture:
    """An image file drawn at ``position``, tinted by ``color``."""

    name: str
    position: Point
    color: Color = field(default_factory=lambda: Color(255, 255, 255))


Shape = Union[Line, Circle, Rectangle, Polygon, Picture]