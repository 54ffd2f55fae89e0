"""Font descriptions, families, styles, transforms and text layout estimation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from chartcraft.style import Color

if TYPE_CHECKING:
    from chartcraft.text_style import TextStyle

__all__ = [
    "LayoutBox",
    "FontError",
    "FontTransform",
    "FontFamily",
    "font_family",
    "FontStyle",
    "font_style",
    "FontData",
    "FontDesc",
    "into_font",
]

LayoutBox = tuple[tuple[int, int], tuple[int, int]]


class FontError(Exception):
    """Raised when a font cannot be found or used."""

    def __init__(self, family: str, style: str) -> None:
        super().__init__(f"No such font: {family} {style}")
        self.family = family
        self.style = style


class FontTransform(Enum):
    """A rotation applied to rendered text, clockwise."""

    NONE = 0
    ROTATE90 = 90
    ROTATE180 = 180
    ROTATE270 = 270

    def offset(self, layout: LayoutBox) -> tuple[int, int]:
        """Offset of the first character's top-left corner in reading orientation."""
        (x0, y0), (x1, y1) = layout
        if self is FontTransform.ROTATE90:
            return (y1 - y0, 0)
        if self is FontTransform.ROTATE180:
            return (x1 - x0, y1 - y0)
        if self is FontTransform.ROTATE270:
            return (0, x1 - x0)
        return (0, 0)

    def transform(self, x: int, y: int) -> tuple[int, int]:
        """Rotate a pixel coordinate."""
        if self is FontTransform.ROTATE90:
            return (-y, x)
        if self is FontTransform.ROTATE180:
            return (-x, -y)
        if self is FontTransform.ROTATE270:
            return (y, -x)
        return (x, y)


@dataclass(frozen=True)
class FontFamily:
    """A generic font class (serif, sans-serif, monospace) or a named family."""

    name: str
    generic: bool = False

    def as_str(self) -> str:
        """A CSS compatible family name."""
        return self.name


FontFamily.SERIF = FontFamily("serif", True)  # type: ignore[attr-defined]
FontFamily.SANS_SERIF = FontFamily("sans-serif", True)  # type: ignore[attr-defined]
FontFamily.MONOSPACE = FontFamily("monospace", True)  # type: ignore[attr-defined]

_GENERIC_FAMILIES = {
    "serif": FontFamily.SERIF,  # type: ignore[attr-defined]
    "sans-serif": FontFamily.SANS_SERIF,  # type: ignore[attr-defined]
    "monospace": FontFamily.MONOSPACE,  # type: ignore[attr-defined]
}


def font_family(value: Union[FontFamily, str]) -> FontFamily:
    """Turn a family name into a font family; generic names are recognised case-insensitively."""
    if isinstance(value, FontFamily):
        return value
    if isinstance(value, str):
        return _GENERIC_FAMILIES.get(value.lower(), FontFamily(value))
    raise TypeError(f"cannot make a font family from {type(value).__name__}")


class FontStyle(Enum):
    """The font variation."""

    NORMAL = "normal"
    OBLIQUE = "oblique"
    ITALIC = "italic"
    BOLD = "bold"

    def as_str(self) -> str:
        """A CSS compatible style name."""
        return self.value


def font_style(value: Union[FontStyle, str]) -> FontStyle:
    """Turn a style name into a font style; unknown names mean normal."""
    if isinstance(value, FontStyle):
        return value
    if isinstance(value, str):
        try:
            return FontStyle(value.lower())
        except ValueError:
            return FontStyle.NORMAL
    raise TypeError(f"cannot make a font style from {type(value).__name__}")


_ADVANCE_RATIO = {True: 0.6, False: 0.55}
_BOLD_WIDENING = 1.1


class FontData:
    """Metric estimation for a family and style, without rasterising glyphs."""

    def __init__(self, family: FontFamily, style: FontStyle) -> None:
        if not family.as_str().strip():
            raise FontError(family.as_str(), style.as_str())
        self.family = family
        self.style = style

    def estimate_layout(self, size: float, text: str) -> LayoutBox:
        """The bounding box of ``text`` at ``size``, with its origin at (0, 0)."""
        if not text:
            return ((0, 0), (0, 0))
        ratio = _ADVANCE_RATIO[self.family == FontFamily.MONOSPACE]  # type: ignore[attr-defined]
        if self.style is FontStyle.BOLD:
            ratio *= _BOLD_WIDENING
        width = math.ceil(size * ratio * len(text))
        height = math.ceil(size)
        return ((0, 0), (width, height))


@dataclass(frozen=True)
class FontDesc:
    """A font: family, size, style and transform."""

    family: FontFamily
    size: float = 1.0
    style: FontStyle = FontStyle.NORMAL
    transform: FontTransform = FontTransform.NONE
    data: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "family", font_family(self.family))
        object.__setattr__(self, "style", font_style(self.style))
        object.__setattr__(self, "size", float(self.size))
        if self.data is None:
            try:
                data: Union[FontData, FontError] = FontData(self.family, self.style)
            except FontError as err:
                data = err
            object.__setattr__(self, "data", data)

    @property
    def name(self) -> str:
        """The family name."""
        return self.family.as_str()

    def resize(self, size: float) -> "FontDesc":
        """The same font at another size."""
        return replace(self, size=size)

    def with_style(self, style: Union[FontStyle, str]) -> "FontDesc":
        """The same font with another style."""
        return replace(self, style=font_style(style))

    def with_transform(self, trans: FontTransform) -> "FontDesc":
        """The same font with another transform."""
        return replace(self, transform=trans)

    def color(self, color: Color) -> "TextStyle":
        """A text style of this font in ``color``."""
        from chartcraft.text_style import TextStyle

        return TextStyle(font=self, color=color.to_rgba())

    def layout_box(self, text: str) -> LayoutBox:
        """The untransformed bounding box of ``text``; raises FontError for a missing font."""
        if isinstance(self.data, FontError):
            raise self.data
        return self.data.estimate_layout(self.size, text)

    def box_size(self, text: str) -> tuple[int, int]:
        """The (width, height) of ``text`` after the font transform."""
        (min_x, min_y), (max_x, max_y) = self.layout_box(text)
        w, h = self.transform.transform(max_x - min_x, max_y - min_y)
        return (abs(w), abs(h))


def into_font(value: Any) -> FontDesc:
    """Build a font from a font, a family, a name, or a (family, size[, style]) tuple."""
    if isinstance(value, FontDesc):
        return value
    if isinstance(value, (FontFamily, str)):
        return FontDesc(font_family(value))
    if isinstance(value, tuple):
        if len(value) == 2:
            family, size = value
            return FontDesc(font_family(family), float(size))
        if len(value) == 3:
            family, size, style = value
            return FontDesc(font_family(family), float(size), font_style(style))
        raise ValueError("a font tuple needs a family, a size and optionally a style")
    raise TypeError(f"cannot make a font from {type(value).__name__}")