"""Absolute and relative sizes measured against a parent dimension."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional

__all__ = [
    "SizeKind",
    "RelativeSize",
    "RelativeSizeWithBound",
    "percent_width",
    "percent_height",
    "percent",
    "dimension_of",
    "in_pixels",
]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def dimension_of(parent: Any) -> tuple[int, int]:
    """The (width, height) of a parent: a pair, or an object that reports one."""
    if isinstance(parent, (tuple, list)):
        if len(parent) != 2:
            raise ValueError("a dimension needs exactly two values")
        width, height = parent
        return (int(width), int(height))
    for name in ("dim", "dim_in_pixel", "get_size"):
        method = getattr(parent, name, None)
        if callable(method):
            return dimension_of(method())
    raise TypeError(f"{type(parent).__name__} has no dimension")


def in_pixels(size: Any, parent: Any) -> int:
    """Convert a size description into pixels relative to ``parent``."""
    if isinstance(size, bool):
        raise TypeError("a boolean is not a size")
    if isinstance(size, int):
        return size
    method = getattr(size, "in_pixels", None)
    if callable(method):
        return method(parent)
    raise TypeError(f"{type(size).__name__} is not a size")


class SizeKind(Enum):
    """Which parent dimension a relative size refers to."""

    HEIGHT = "height"
    WIDTH = "width"
    SMALLER = "smaller"


@dataclass(frozen=True)
class RelativeSize:
    """A fraction of the parent's height, width, or smaller side."""

    kind: SizeKind
    ratio: float

    def min(self, min_sz: int) -> "RelativeSizeWithBound":
        """This size with a lower bound in pixels."""
        return RelativeSizeWithBound(self, lower=min_sz)

    def max(self, max_sz: int) -> "RelativeSizeWithBound":
        """This size with an upper bound in pixels."""
        return RelativeSizeWithBound(self, upper=max_sz)

    def in_pixels(self, parent: Any) -> int:
        width, height = dimension_of(parent)
        if self.kind is SizeKind.WIDTH:
            base = width
        elif self.kind is SizeKind.HEIGHT:
            base = height
        else:
            base = min(width, height)
        return _round_half_away(self.ratio * base)


@dataclass(frozen=True)
class RelativeSizeWithBound:
    """A relative size with optional lower and upper pixel bounds."""

    size: RelativeSize
    lower: Optional[int] = None
    upper: Optional[int] = None

    def min(self, min_sz: int) -> "RelativeSizeWithBound":
        """Set the lower bound."""
        return replace(self, lower=min_sz)

    def max(self, max_sz: int) -> "RelativeSizeWithBound":
        """Set the upper bound."""
        return replace(self, upper=max_sz)

    def in_pixels(self, parent: Any) -> int:
        size = self.size.in_pixels(parent)
        lower_capped = size if self.lower is None else max(self.lower, size)
        # An upper bound caps the raw size, overriding the lower bound.
        return lower_capped if self.upper is None else min(self.upper, size)


def percent_width(value: float) -> RelativeSize:
    """A percentage of the parent's width."""
    return RelativeSize(SizeKind.WIDTH, float(value) / 100.0)


def percent_height(value: float) -> RelativeSize:
    """A percentage of the parent's height."""
    return RelativeSize(SizeKind.HEIGHT, float(value) / 100.0)


def percent(value: float) -> RelativeSize:
    """A percentage of the smaller of the parent's width and height."""
    return RelativeSize(SizeKind.SMALLER, float(value) / 100.0)