"""Series: iterables that turn data points into drawable elements."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

from chartcraft.element import DynElement, into_dyn
from chartcraft.shapes import Circle, Path, Pixel, Polygon, Rectangle
from chartcraft.style import GREEN, TRANSPARENT, ShapeStyle, into_shape_style

__all__ = ["LineSeries", "PointSeries", "AreaSeries", "Histogram"]


class LineSeries:
    """A line plot: yields a single path through all the data points."""

    def __init__(self, data: Iterable[Any], style: Any) -> None:
        self._style: ShapeStyle = into_shape_style(style)
        self._data = list(data)

    def __iter__(self) -> Iterator[Path]:
        yield Path(list(self._data), self._style)


def _marker_factory(marker: Any) -> Callable[[Any, Any, ShapeStyle], Any]:
    if marker is Pixel:
        return lambda pos, _size, style: Pixel(pos, style)
    return lambda pos, size, style: marker(pos, size, style)


class PointSeries:
    """A point plot: yields one marker element per data point."""

    def __init__(self, data: Iterable[Any], size: Any, style: Any, marker: Any = Circle) -> None:
        self._data = list(data)
        self._size = size
        self._style: ShapeStyle = into_shape_style(style)
        self._make_point: Callable[[Any, Any, ShapeStyle], Any] = _marker_factory(marker)

    @classmethod
    def of_element(
        cls,
        data: Iterable[Any],
        size: Any,
        style: Any,
        make_point: Callable[[Any, Any, ShapeStyle], Any],
    ) -> "PointSeries":
        """A point series whose elements are built by ``make_point(coord, size, style)``."""
        series = cls(data, size, style)
        series._make_point = make_point
        return series

    def __iter__(self) -> Iterator[Any]:
        for coord in self._data:
            yield self._make_point(coord, self._size, self._style)


class AreaSeries:
    """An area plot: a filled polygon down to a baseline, then its border path."""

    def __init__(self, data: Iterable[Any], baseline: Any, area_style: Any) -> None:
        self._data = [tuple(point) for point in data]
        self._baseline = baseline
        self._area_style: ShapeStyle = into_shape_style(area_style)
        self._border_style: ShapeStyle = into_shape_style(TRANSPARENT)

    def border_style(self, style: Any) -> "AreaSeries":
        """Set the style of the border line."""
        self._border_style = into_shape_style(style)
        return self

    def __iter__(self) -> Iterator[DynElement]:
        outline = list(self._data)
        if outline:
            outline.append((outline[-1][0], self._baseline))
            outline.append((outline[0][0], self._baseline))
        yield into_dyn(Polygon(outline, self._area_style))
        yield into_dyn(Path(list(self._data), self._border_style))


def _next_integer(value: Any) -> Any:
    return value + 1


class Histogram:
    """Aggregates values by key and yields one bar per key."""

    def __init__(
        self,
        data: Iterable[tuple[Any, Any]] = (),
        margin: int = 5,
        style: Optional[Any] = None,
        *,
        horizontal: bool = False,
        next_value: Callable[[Any], Any] = _next_integer,
    ) -> None:
        self._style: ShapeStyle = GREEN.filled() if style is None else into_shape_style(style)
        self._margin = margin
        self._baseline: Any = 0
        self._horizontal = horizontal
        self._next_value = next_value
        self._buckets: dict[Any, Any] = {}
        self.data(data)

    def style(self, style: Any) -> "Histogram":
        """Set the style of the bars."""
        self._style = into_shape_style(style)
        return self

    def baseline(self, baseline: Any) -> "Histogram":
        """Set the value the bars start from."""
        self._baseline = baseline
        return self

    def margin(self, value: int) -> "Histogram":
        """Set the margin around each bar in pixels."""
        self._margin = value
        return self

    def data(self, data: Iterable[tuple[Any, Any]]) -> "Histogram":
        """Replace the data, summing the values that share a key."""
        buckets: dict[Any, Any] = {}
        for key, value in data:
            buckets[key] = buckets[key] + value if key in buckets else value
        self._buckets = buckets
        return self

    def __iter__(self) -> Iterator[Rectangle]:
        for key, value in self._buckets.items():
            following = self._next_value(key)
            if self._horizontal:
                rect = Rectangle(((value, key), (self._baseline, following)), self._style)
                rect.set_margin(self._margin, self._margin, 0, 0)
            else:
                rect = Rectangle(((key, value), (following, self._baseline)), self._style)
                rect.set_margin(0, 0, self._margin, self._margin)
            yield rect