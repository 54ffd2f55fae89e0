"""Building blocks for drawing charts: colours, styles, sizes, fonts, elements and series."""

__version__ = "0.1.0"

__all__ = [
    "style",
    "size",
    "font",
    "text_style",
    "element",
    "shapes",
    "markers",
    "bars",
    "composable",
    "bitmap",
    "text",
    "series",
    "notebook",
]