"""Single-line and multi-line text elements."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from chartcraft.element import Element
from chartcraft.font import FontDesc, FontError, LayoutBox, into_font
from chartcraft.text_style import TextStyle

__all__ = ["Text", "MultiLineText", "multiline_from_str"]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _as_text_style(style: Any) -> TextStyle:
    if isinstance(style, TextStyle):
        return style
    return TextStyle(font=into_font(style))


def _split_lines(text: str) -> list[str]:
    """Split on newlines; a trailing newline adds no empty line and a trailing CR is dropped."""
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _wrap_line(line: str, max_width: int, font: FontDesc) -> Iterator[str]:
    remaining = line
    while remaining:
        width = 0
        count = 0
        for ch in remaining:
            try:
                char_width = font.box_size(ch)[0]
            except FontError:
                char_width = 0
            width += char_width
            if width > max_width:
                break
            count += 1
        count = max(count, 1)
        yield remaining[:count]
        remaining = remaining[count:]


@dataclass
class Text(Element):
    """A single line of text anchored at its upper-left corner."""

    text: str
    coord: Any
    style: TextStyle

    def __post_init__(self) -> None:
        self.style = _as_text_style(self.style)

    def points(self) -> list[Any]:
        return [self.coord]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        point = next(iter(points), None)
        if point is not None:
            backend.draw_text(self.text, self.style.font, point, self.style.color)


@dataclass
class MultiLineText(Element):
    """Several lines of left-aligned text anchored at the upper-left corner."""

    coord: Any
    style: TextStyle
    lines: list[str] = field(default_factory=list)
    line_height: float = 1.25

    def __post_init__(self) -> None:
        self.style = _as_text_style(self.style)
        self.lines = list(self.lines)

    def set_line_height(self, value: float) -> "MultiLineText":
        """Set the line height as a multiple of the font size."""
        self.line_height = value
        return self

    def push_line(self, line: str) -> None:
        """Append a line."""
        self.lines.append(str(line))

    def _layout_lines(self, origin: tuple[int, int]) -> Iterator[tuple[int, int]]:
        x0, y0 = origin
        step = self.style.font.size * self.line_height
        for idx in range(len(self.lines)):
            yield (_round_half_away(float(x0)), _round_half_away(y0 + idx * step))

    def estimate_dimension(self) -> tuple[int, int]:
        """The (width, height) the text would cover; raises FontError for a missing font."""
        max_x, max_y = 0, 0
        for (x, y), line in zip(self._layout_lines((0, 0)), self.lines):
            dx, dy = self.style.font.box_size(line)
            max_x = max(max_x, x + dx)
            max_y = max(max_y, y + dy)
        return (max_x, max_y)

    def relocate(self, coord: Any) -> None:
        """Move the text to ``coord``."""
        self.coord = coord

    def compute_line_layout(self) -> list[LayoutBox]:
        """The pixel box of each line, for text positioned in pixel coordinates."""
        boxes = []
        for (x, y), line in zip(self._layout_lines(self.coord), self.lines):
            dx, dy = self.style.font.box_size(line)
            boxes.append(((x, y), (x + dx, y + dy)))
        return boxes

    def points(self) -> list[Any]:
        return [self.coord]

    def draw(self, points: Iterable[tuple[int, int]], backend: Any, parent_dim: tuple[int, int]) -> None:
        origin = next(iter(points), None)
        if origin is None:
            return
        for point, line in zip(self._layout_lines(origin), self.lines):
            backend.draw_text(line, self.style.font, point, self.style.color)


def multiline_from_str(text: str, pos: Any, style: Any, max_width: int) -> MultiLineText:
    """Split ``text`` into lines, wrapping any line wider than ``max_width`` (0: no wrapping)."""
    result = MultiLineText(pos, style)
    font = result.style.font
    for line in _split_lines(text):
        if max_width == 0 or not line:
            result.push_line(line)
        else:
            for piece in _wrap_line(line, max_width, font):
                result.push_line(piece)
    return result