"""Colors, palettes and shape styles."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

__all__ = [
    "Color",
    "RGBAColor",
    "RGBColor",
    "HSLColor",
    "Palette",
    "PaletteColor",
    "ShapeStyle",
    "into_shape_style",
    "WHITE",
    "BLACK",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "TRANSPARENT",
    "PALETTE99",
    "PALETTE9999",
    "PALETTE100",
]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _to_u8(value: float) -> int:
    """Round and saturate into the 0..255 channel range."""
    if math.isnan(value):
        return 0
    return max(0, min(255, _round_half_away(value)))


def _clamp_unit(value: float) -> float:
    """Clamp into [0, 1]; NaN becomes the upper bound."""
    if math.isnan(value):
        return 1.0
    return max(0.0, min(1.0, value))


class Color(ABC):
    """Any color representation."""

    @abstractmethod
    def rgb(self) -> tuple[int, int, int]:
        """The color as an (r, g, b) tuple of 0..255 channels."""

    def alpha(self) -> float:
        """The opacity of the color."""
        return 1.0

    def mix(self, value: float) -> "RGBAColor":
        """The color with its opacity scaled by ``value``."""
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha() * value)

    def to_rgba(self) -> "RGBAColor":
        """The color as an RGBA color."""
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha())

    def filled(self) -> "ShapeStyle":
        """A filled shape style of this color."""
        return into_shape_style(self).as_filled()

    def stroke_width(self, width: int) -> "ShapeStyle":
        """A shape style of this color with the given stroke width."""
        return into_shape_style(self).with_stroke_width(width)


@dataclass(frozen=True)
class RGBAColor(Color):
    """A color with red, green, blue channels and an alpha value."""

    r: int
    g: int
    b: int
    a: float

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def alpha(self) -> float:
        return self.a

    def to_rgba(self) -> "RGBAColor":
        return self


@dataclass(frozen=True)
class RGBColor(Color):
    """An opaque color given by its RGB channels."""

    r: int
    g: int
    b: int

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class HSLColor(Color):
    """An opaque color in HSL space, each component in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741

    def rgb(self) -> tuple[int, int, int]:
        h, s, l = (_clamp_unit(self.h), _clamp_unit(self.s), _clamp_unit(self.l))  # noqa: E741

        if s == 0.0:
            value = _to_u8(l * 255.0)
            return (value, value, value)

        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q

        def convert(t: float) -> int:
            if t < 0.0:
                t += 1.0
            if t > 1.0:
                t -= 1.0
            if t < 1.0 / 6.0:
                value = p + (q - p) * 6.0 * t
            elif t < 1.0 / 2.0:
                value = q
            elif t < 2.0 / 3.0:
                value = p + (q - p) * (2.0 / 3.0 - t) * 6.0
            else:
                value = p
            return _to_u8(value * 255.0)

        return (convert(h + 1.0 / 3.0), convert(h), convert(h - 1.0 / 3.0))


@dataclass(frozen=True)
class Palette:
    """A fixed, ordered set of colors."""

    name: str
    colors: tuple[tuple[int, int, int], ...]

    def __len__(self) -> int:
        return len(self.colors)

    def pick(self, idx: int) -> "PaletteColor":
        """The color at ``idx``, wrapping around the palette."""
        return PaletteColor(self, idx % len(self.colors))


@dataclass(frozen=True)
class PaletteColor(Color):
    """A color chosen from a palette."""

    palette: Palette
    index: int

    def rgb(self) -> tuple[int, int, int]:
        return self.palette.colors[self.index]


@dataclass(frozen=True)
class ShapeStyle:
    """Style of any shape: color, fill and stroke width."""

    color: RGBAColor
    filled: bool = False
    stroke_width: int = 1

    def as_filled(self) -> "ShapeStyle":
        """The same style, filled."""
        return replace(self, color=self.color.to_rgba(), filled=True)

    def with_stroke_width(self, width: int) -> "ShapeStyle":
        """The same style with another stroke width."""
        return replace(self, color=self.color.to_rgba(), stroke_width=width)


def into_shape_style(value: ShapeStyle | Color) -> ShapeStyle:
    """Turn a color or a shape style into a shape style."""
    if isinstance(value, ShapeStyle):
        return value
    if isinstance(value, Color):
        return ShapeStyle(color=value.to_rgba(), filled=False, stroke_width=1)
    raise TypeError(f"cannot make a shape style from {type(value).__name__}")


WHITE = RGBColor(255, 255, 255)
BLACK = RGBColor(0, 0, 0)
RED = RGBColor(255, 0, 0)
GREEN = RGBColor(0, 255, 0)
BLUE = RGBColor(0, 0, 255)
YELLOW = RGBColor(255, 255, 0)
CYAN = RGBColor(0, 255, 255)
MAGENTA = RGBColor(255, 0, 255)
TRANSPARENT = RGBAColor(0, 0, 0, 0.0)

PALETTE99 = Palette(
    "Palette99",
    (
        (230, 25, 75),
        (60, 180, 75),
        (255, 225, 25),
        (0, 130, 200),
        (245, 130, 48),
        (145, 30, 180),
        (70, 240, 240),
        (240, 50, 230),
        (210, 245, 60),
        (250, 190, 190),
        (0, 128, 128),
        (230, 190, 255),
        (170, 110, 40),
        (255, 250, 200),
        (128, 0, 0),
        (170, 255, 195),
        (128, 128, 0),
        (255, 215, 180),
        (0, 0, 128),
        (128, 128, 128),
        (0, 0, 0),
    ),
)

PALETTE9999 = Palette(
    "Palette9999",
    (
        (255, 225, 25),
        (0, 130, 200),
        (245, 130, 48),
        (250, 190, 190),
        (230, 190, 255),
        (128, 0, 0),
        (0, 0, 128),
        (128, 128, 128),
        (0, 0, 0),
    ),
)

PALETTE100 = Palette(
    "Palette100",
    ((255, 225, 25), (0, 130, 200), (128, 128, 128), (0, 0, 0)),
)