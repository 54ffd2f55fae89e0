"""Point markers: crosses and triangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable

from chartcraft.element import Element
from chartcraft.size import in_pixels
from chartcraft.style import ShapeStyle, into_shape_style

__all__ = ["Cross", "TriangleMarker"]

_TRIANGLE_ANGLES = (-90, -210, -330)


@dataclass
class Cross(Element):
    """An X-shaped marker centred on a point."""

    center: Any
    size: Any
    style: ShapeStyle

    def __post_init__(self) -> None:
        self.style = into_shape_style(self.style)

    def points(self) -> list[Any]:
        return [self.center]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        point = next(iter(points), None)
        if point is None:
            return
        x, y = point
        size = in_pixels(self.size, parent_dim)
        x0, y0 = x - size, y - size
        x1, y1 = x + size, y + size
        backend.draw_line((x0, y0), (x1, y1), self.style.color)
        backend.draw_line((x0, y1), (x1, y0), self.style.color)


@dataclass
class TriangleMarker(Element):
    """A filled upward-pointing triangle centred on a point."""

    center: Any
    size: Any
    style: ShapeStyle

    def __post_init__(self) -> None:
        self.style = into_shape_style(self.style)

    def points(self) -> list[Any]:
        return [self.center]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        point = next(iter(points), None)
        if point is None:
            return
        x, y = point
        size = in_pixels(self.size, parent_dim)
        vertices = []
        for degrees in _TRIANGLE_ANGLES:
            rad = degrees * math.pi / 180.0
            vertices.append(
                (
                    math.ceil(math.cos(rad) * size + x),
                    math.ceil(math.sin(rad) * size + y),
                )
            )
        backend.fill_polygon(vertices, self.style.color)