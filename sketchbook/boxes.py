"""A field of randomly placed, randomly coloured boxes."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .scene import Color, Rectangle


@dataclass
class Box:
    """A small coloured square."""

    x: int
    y: int
    color: Color
    width: int = 20
    height: int = 20

    @classmethod
    def random(cls, area_width: float, rng: Optional[random.Random] = None) -> Box:
        """Place a box at random; both coordinates are drawn from ``area_width``."""
        rng = rng or random.Random()
        x = int(rng.random() * area_width)
        y = int(rng.random() * area_width)
        color = Color(*(int(rng.random() * 255) for _ in range(3)))
        return cls(x=x, y=y, color=color)

    def draw(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.width, self.height, self.color)


@dataclass
class BoxesSketch:
    """A static scene of many boxes on a black background."""

    width: int = 1024
    height: int = 768
    count: int = 5500
    rng: Optional[random.Random] = None
    background: Color = field(default=Color(0, 0, 0), init=False)
    frame_rate: int = field(default=60, init=False)
    elapsed: float = field(default=0.0, init=False)
    boxes: List[Box] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must not be negative")
        rng = self.rng or random.Random()
        self.boxes = [Box.random(self.width, rng) for _ in range(self.count)]

    def update(self, dt: float) -> None:
        """Advance the clock; the boxes themselves do not move."""
        self.elapsed += dt

    def draw(self) -> List[Rectangle]:
        return [box.draw() for box in self.boxes]