"""Candlesticks and error bars."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from chartcraft.element import Element
from chartcraft.style import ShapeStyle, into_shape_style

__all__ = [
    "CandleStick",
    "ErrorBarOrient",
    "ErrorBar",
    "error_bar_vertical",
    "error_bar_horizontal",
]


class CandleStick(Element):
    """A candlestick showing open, high, low and close of one period."""

    def __init__(
        self,
        x: Any,
        open: Any,  # noqa: A002
        high: Any,
        low: Any,
        close: Any,
        gain_style: Any,
        loss_style: Any,
        width: int,
    ) -> None:
        self.style: ShapeStyle = into_shape_style(gain_style if open < close else loss_style)
        self.width = width
        self.coords = [(x, open), (x, high), (x, low), (x, close)]

    def points(self) -> list[Any]:
        return list(self.coords)

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        pts = [tuple(p) for _, p in zip(range(4), points)]
        if len(pts) != 4:
            return
        if pts[0][1] > pts[3][1]:
            pts[0], pts[3] = pts[3], pts[0]
        left = self.width // 2
        right = self.width - self.width // 2
        color = self.style.color
        backend.draw_line(pts[0], pts[1], color)
        backend.draw_line(pts[2], pts[3], color)
        upper = (pts[0][0] - left, pts[0][1])
        lower = (pts[3][0] + right, pts[3][1])
        backend.draw_rect(upper, lower, color, False)


class ErrorBarOrient(Enum):
    """Whether an error bar spans along the y axis or the x axis."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    def make_coord(self, key: Any, value: Any) -> tuple[Any, Any]:
        """The guest coordinate of ``value`` at ``key``."""
        if self is ErrorBarOrient.HORIZONTAL:
            return (value, key)
        return (key, value)

    def ending_coord(self, coord: tuple[int, int], width: int) -> tuple[tuple[int, int], tuple[int, int]]:
        """The end points of the cap drawn across ``coord``."""
        x, y = coord
        half = width // 2
        if self is ErrorBarOrient.HORIZONTAL:
            return ((x, y - half), (x, y + half))
        return ((x - half, y), (x + half, y))


@dataclass
class ErrorBar(Element):
    """An error bar: a low/high span with caps and a marker at the average."""

    key: Any
    values: tuple[Any, Any, Any]
    style: ShapeStyle
    width: int
    orient: ErrorBarOrient = ErrorBarOrient.VERTICAL

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if len(values) != 3:
            raise ValueError("an error bar needs low, average and high values")
        self.values = values
        self.style = into_shape_style(self.style)

    def points(self) -> list[Any]:
        return [self.orient.make_coord(self.key, value) for value in self.values]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        pts = [tuple(p) for _, p in zip(range(3), points)]
        if len(pts) < 3:
            raise ValueError("an error bar needs three points to draw")
        color = self.style.color
        start, end = self.orient.ending_coord(pts[0], self.width)
        backend.draw_line(start, end, color)
        start, end = self.orient.ending_coord(pts[2], self.width)
        backend.draw_line(start, end, color)
        backend.draw_line(pts[0], pts[2], color)
        backend.draw_circle(pts[1], self.width // 2, color, self.style.filled)


def error_bar_vertical(key: Any, low: Any, avg: Any, high: Any, style: Any, width: int) -> ErrorBar:
    """An error bar spanning along the y axis at x = ``key``."""
    return ErrorBar(key, (low, avg, high), style, width, ErrorBarOrient.VERTICAL)


def error_bar_horizontal(key: Any, low: Any, avg: Any, high: Any, style: Any, width: int) -> ErrorBar:
    """An error bar spanning along the x axis at y = ``key``."""
    return ErrorBar(key, (low, avg, high), style, width, ErrorBarOrient.HORIZONTAL)