"""Ad-hoc composition of elements relative to an anchor point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from chartcraft.element import Element

__all__ = ["EmptyElement", "BoxedElement", "ComposedElement"]


def _is_element(value: Any) -> bool:
    return callable(getattr(value, "points", None)) and callable(getattr(value, "draw", None))


def _draw_shifted(element: Any, origin: tuple[int, int], backend: Any, parent_dim: tuple[int, int]) -> None:
    x0, y0 = origin
    shifted = [(p[0] + x0, p[1] + y0) for p in element.points()]
    element.draw(iter(shifted), backend, parent_dim)


@dataclass
class EmptyElement(Element):
    """An anchor that draws nothing; add pixel-offset elements to it with ``+``."""

    coord: Any

    def points(self) -> list[Any]:
        return [self.coord]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        return None

    def __add__(self, other: Any) -> "BoxedElement":
        if not _is_element(other):
            return NotImplemented
        return BoxedElement(inner=other, offset=self.coord)


@dataclass
class BoxedElement(Element):
    """A composed element with a single component."""

    inner: Any
    offset: Any

    def points(self) -> list[Any]:
        return [self.offset]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        origin = next(iter(points), None)
        if origin is not None:
            _draw_shifted(self.inner, origin, backend, parent_dim)

    def __add__(self, other: Any) -> "ComposedElement":
        if not _is_element(other):
            return NotImplemented
        return ComposedElement(first=self.inner, second=other, offset=self.offset)


@dataclass
class ComposedElement(Element):
    """A composed element with at least two components."""

    first: Any
    second: Any
    offset: Any

    def points(self) -> list[Any]:
        return [self.offset]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        origin = next(iter(points), None)
        if origin is None:
            return
        _draw_shifted(self.first, origin, backend, parent_dim)
        _draw_shifted(self.second, origin, backend, parent_dim)

    def __add__(self, other: Any) -> "ComposedElement":
        if not _is_element(other):
            return NotImplemented
        return ComposedElement(
            first=self.first,
            second=ComposedElement(first=self.second, second=other, offset=(0, 0)),
            offset=self.offset,
        )