"""Text styles: a font together with a color."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from chartcraft.font import FontDesc, FontFamily, FontTransform, into_font
from chartcraft.size import in_pixels
from chartcraft.style import BLACK, Color, RGBAColor

__all__ = ["TextStyle", "into_text_style"]


@dataclass(frozen=True)
class TextStyle:
    """The font and color of a piece of text."""

    font: FontDesc
    color: RGBAColor = field(default_factory=BLACK.to_rgba)

    def with_color(self, color: Color) -> "TextStyle":
        """The same style in another color."""
        return replace(self, color=color.to_rgba())

    def with_transform(self, trans: FontTransform) -> "TextStyle":
        """The same style with the font transformed."""
        return replace(self, font=self.font.with_transform(trans))


def into_text_style(value: Any, parent: Any) -> TextStyle:
    """Build a text style, resolving a relative font size against ``parent``."""
    if isinstance(value, TextStyle):
        return value
    if isinstance(value, (FontDesc, FontFamily, str)):
        return TextStyle(font=into_font(value))
    if isinstance(value, tuple) and len(value) in (2, 3):
        family, size, *rest = value
        pixels = float(size) if isinstance(size, float) else in_pixels(size, parent)
        return TextStyle(font=into_font((family, pixels, *rest)))
    raise TypeError(f"cannot make a text style from {type(value).__name__}")