"""An element that carries an RGB bitmap and blits it onto a backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from chartcraft.element import Element

__all__ = ["BitMapElement"]


@dataclass
class BitMapElement(Element):
    """An RGB bitmap (three bytes per pixel) anchored at its upper-left corner."""

    pos: Any
    size: tuple[int, int]
    image: Optional[bytearray] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        width, height = self.size
        if width < 0 or height < 0:
            raise ValueError("a bitmap cannot have a negative size")
        self.size = (int(width), int(height))
        expected = self.size[0] * self.size[1] * 3
        if self.image is None:
            self.image = bytearray(expected)
        else:
            self.image = bytearray(self.image)
            if len(self.image) != expected:
                raise ValueError(
                    f"a {self.size[0]}x{self.size[1]} RGB bitmap needs {expected} bytes, "
                    f"got {len(self.image)}"
                )

    def copy_to(self, pos: Any) -> "BitMapElement":
        """A copy of this bitmap placed at ``pos``."""
        return BitMapElement(pos, self.size, bytearray(self.image))

    def move_to(self, pos: Any) -> None:
        """Move this bitmap to ``pos``."""
        self.pos = pos

    def points(self) -> list[Any]:
        return [self.pos]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        point = next(iter(points), None)
        if point is not None:
            backend.blit_bitmap(point, self.size, bytes(self.image))