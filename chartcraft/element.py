"""The element protocol: things with key points that know how to draw themselves."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

__all__ = ["Element", "DynElement", "into_dyn"]


class Element(ABC):
    """A drawable unit described by key points in some guest coordinate system.

    ``points`` yields the key points in guest coordinates; once they have been
    mapped to pixel coordinates, ``draw`` renders the element on a backend.
    """

    @abstractmethod
    def points(self) -> Sequence[Any]:
        """The key points of the element in guest coordinates."""

    @abstractmethod
    def draw(
        self,
        points: Iterable[tuple[int, int]],
        backend: Any,
        parent_dim: tuple[int, int],
    ) -> None:
        """Draw on ``backend`` using the key points already mapped to pixels."""


@dataclass(frozen=True)
class DynElement(Element):
    """A wrapper holding a snapshot of an element's points and the element itself."""

    point_list: tuple[Any, ...]
    drawable: Any

    def points(self) -> tuple[Any, ...]:
        return self.point_list

    def draw(
        self,
        points: Iterable[tuple[int, int]],
        backend: Any,
        parent_dim: tuple[int, int],
    ) -> None:
        self.drawable.draw(iter(points), backend, parent_dim)


def into_dyn(element: Any) -> DynElement:
    """Wrap any element, capturing a copy of its current key points."""
    points_method = getattr(element, "points", None)
    draw_method = getattr(element, "draw", None)
    if not callable(points_method) or not callable(draw_method):
        raise TypeError(f"{type(element).__name__} is not a drawable element")
    return DynElement(point_list=tuple(points_method()), drawable=element)