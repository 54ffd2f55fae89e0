"""Display of rendered SVG figures inside notebooks."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

__all__ = ["SVGWrapper"]

_BEGIN = "EVCXR_BEGIN_CONTENT text/html"
_END = "EVCXR_END_CONTENT"


@dataclass(frozen=True, repr=False)
class SVGWrapper:
    """An SVG document with the CSS style of the block that shows it."""

    content: bytes
    css: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.content, str):
            object.__setattr__(self, "content", self.content.encode("utf-8"))
        else:
            object.__setattr__(self, "content", bytes(self.content))

    @property
    def svg(self) -> str:
        """The SVG text; invalid UTF-8 sequences become replacement characters."""
        return self.content.decode("utf-8", errors="replace")

    def style(self, style: Union[str, object]) -> "SVGWrapper":
        """The same figure shown with another CSS style."""
        return replace(self, css=str(style))

    def _repr_html_(self) -> str:
        return f'<div style="{self.css}">{self.svg}</div>'

    def __repr__(self) -> str:
        return f"{_BEGIN}\n{self._repr_html_()}\n{_END}"

    def evcxr_display(self) -> None:
        """Print the figure in the notebook content protocol."""
        print(repr(self))