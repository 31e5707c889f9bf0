"""Drawing scene primitives with pygame and running sketches in a window."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Optional, Protocol, Union

import pygame

from .scene import Circle, Color, Line, Picture, Polygon, Rectangle, Shape


class Sketch(Protocol):
    """What :func:`run` needs from a sketch."""

    width: int
    height: int
    frame_rate: int
    background: Color

    def update(self, dt: float) -> None: ...

    def draw(self) -> Iterable[Shape]: ...


class Renderer:
    """Draws lists of shapes onto a pygame surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        image_dir: Union[str, Path, None] = None,
    ) -> None:
        self.surface = surface
        self.image_dir = Path(image_dir) if image_dir is not None else Path(".")
        self._images: Dict[str, Optional[pygame.Surface]] = {}

    def render(self, background: Color, shapes: Iterable[Shape]) -> pygame.Surface:
        """Clear to ``background`` and draw ``shapes`` in order."""
        self.surface.fill(_rgba(background))
        for shape in shapes:
            self._draw(shape)
        return self.surface

    def _draw(self, shape: Shape) -> None:
        if isinstance(shape, Picture):
            self._draw_picture(shape)
            return
        color = shape.color
        if color.a == 0:
            return
        if color.a == 255:
            self._draw_primitive(self.surface, shape)
            return
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA, 32)
        overlay.fill((0, 0, 0, 0))
        self._draw_primitive(overlay, shape)
        self.surface.blit(overlay, (0, 0))

    @staticmethod
    def _draw_primitive(target: pygame.Surface, shape: Shape) -> None:
        color = _rgba(shape.color)
        if isinstance(shape, Line):
            pygame.draw.line(target, color, shape.start, shape.end)
        elif isinstance(shape, Circle):
            width = 0 if shape.filled else 1
            pygame.draw.circle(target, color, shape.center, shape.radius, width)
        elif isinstance(shape, Rectangle):
            rect = pygame.Rect(
                round(shape.x), round(shape.y), round(shape.width), round(shape.height)
            )
            rect.normalize()
            pygame.draw.rect(target, color, rect, 0 if shape.filled else 1)
        elif isinstance(shape, Polygon):
            points = list(shape.points)
            if len(points) < 2:
                return
            if shape.filled and shape.closed and len(points) >= 3:
                pygame.draw.polygon(target, color, points)
            else:
                pygame.draw.lines(target, color, shape.closed, points)
        else:
            raise TypeError(f"cannot draw {shape!r}")

    def _load(self, name: str) -> Optional[pygame.Surface]:
        if name not in self._images:
            try:
                self._images[name] = pygame.image.load(str(self.image_dir / name))
            except (pygame.error, FileNotFoundError, OSError):
                self._images[name] = None
        return self._images[name]

    def _draw_picture(self, picture: Picture) -> None:
        image = self._load(picture.name)
        if image is None or picture.color.a == 0:
            return
        if image.get_flags() & pygame.SRCALPHA:
            tinted = image.copy()
        else:
            tinted = pygame.Surface(image.get_size(), pygame.SRCALPHA, 32)
            tinted.fill((255, 255, 255, 255))
            tinted.blit(image, (0, 0))
        tinted.fill(_rgba(picture.color), special_flags=pygame.BLEND_RGBA_MULT)
        x, y = picture.position
        self.surface.blit(tinted, (round(x), round(y)))


def _rgba(color: Color) -> tuple:
    return (color.r, color.g, color.b, color.a)


def run(
    sketch: Sketch,
    image_dir: Union[str, Path, None] = None,
    max_frames: Optional[int] = None,
) -> int:
    """Open a window for ``sketch`` and animate it; return the frames shown.

    The loop ends when the window is closed, Escape is pressed, or after
    ``max_frames`` frames when that is given.
    """
    if max_frames is not None and max_frames < 0:
        raise ValueError("max_frames must not be negative")
    pygame.init()
    try:
        screen = pygame.display.set_mode((sketch.width, sketch.height))
        pygame.display.set_caption(type(sketch).__name__)
        renderer = Renderer(screen, image_dir)
        clock = pygame.time.Clock()
        frames = 0
        while max_frames is None or frames < max_frames:
            if _quit_requested():
                break
            dt = clock.tick(sketch.frame_rate) / 1000.0
            sketch.update(dt)
            renderer.render(sketch.background, sketch.draw())
            pygame.display.flip()
            frames += 1
        return frames
    finally:
        pygame.quit()


def _quit_requested() -> bool:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
    return False