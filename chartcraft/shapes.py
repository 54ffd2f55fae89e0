"""Basic shape elements: pixels, paths, rectangles, circles and polygons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from chartcraft.element import Element
from chartcraft.size import in_pixels
from chartcraft.style import ShapeStyle, into_shape_style

__all__ = ["Pixel", "Path", "Rectangle", "Circle", "Polygon"]


@dataclass
class Pixel(Element):
    """A single pixel."""

    pos: Any
    style: ShapeStyle

    def __post_init__(self) -> None:
        self.style = into_shape_style(self.style)

    def points(self) -> list[Any]:
        return [self.pos]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        point = next(iter(points), None)
        if point is not None:
            backend.draw_pixel(point, self.style.color)


@dataclass
class Path(Element):
    """A series of connected line segments."""

    coords: list[Any]
    style: ShapeStyle

    def __post_init__(self) -> None:
        self.coords = list(self.coords)
        self.style = into_shape_style(self.style)

    def points(self) -> list[Any]:
        return self.coords

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        backend.draw_path(list(points), self.style)


@dataclass
class Rectangle(Element):
    """A rectangle given by two opposite corners, with optional inner margins."""

    corners: tuple[Any, Any]
    style: ShapeStyle
    margin: tuple[int, int, int, int] = field(default=(0, 0, 0, 0))

    def __post_init__(self) -> None:
        corners = tuple(self.corners)
        if len(corners) != 2:
            raise ValueError("a rectangle needs exactly two corners")
        self.corners = corners
        self.style = into_shape_style(self.style)

    def set_margin(self, t: int, b: int, l: int, r: int) -> "Rectangle":  # noqa: E741
        """Set the top, bottom, left and right margins in pixels."""
        self.margin = (t, b, l, r)
        return self

    def points(self) -> list[Any]:
        return list(self.corners)

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        it = iter(points)
        first, second = next(it, None), next(it, None)
        if first is None or second is None:
            return
        top, bottom, left, right = self.margin
        upper_left = (min(first[0], second[0]) + left, min(first[1], second[1]) + top)
        lower_right = (max(first[0], second[0]) - right, max(first[1], second[1]) - bottom)
        backend.draw_rect(upper_left, lower_right, self.style, self.style.filled)


@dataclass
class Circle(Element):
    """A circle around a center with a radius given by a size description."""

    center: Any
    size: Any
    style: ShapeStyle

    def __post_init__(self) -> None:
        self.style = into_shape_style(self.style)

    def points(self) -> list[Any]:
        return [self.center]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        point = next(iter(points), None)
        if point is not None:
            radius = max(in_pixels(self.size, parent_dim), 0)
            backend.draw_circle(point, radius, self.style, self.style.filled)


@dataclass
class Polygon(Element):
    """A filled polygon."""

    coords: list[Any]
    style: ShapeStyle

    def __post_init__(self) -> None:
        self.coords = list(self.coords)
        self.style = into_shape_style(self.style)

    def points(self) -> list[Any]:
        return self.coords

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        backend.fill_polygon(list(points), self.style.color)