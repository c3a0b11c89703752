"""Width-tracked styled text cells for table and grid layouts.

A ``TextCell`` keeps its display width next to its styled fragments, so
layouts never have to measure painted strings. Widths are computed from the
raw text when the cell is created and summed on concatenation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .ansi import display_width
from .style import Plain, Style

BLANK_GLYPH = "-"


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class TextCell:
    """Styled fragments plus the visible width of their unstyled text."""

    width: int = 0
    contents: tuple[tuple[Style, str], ...] = ()

    @classmethod
    def paint(cls, style: Style, text: str) -> "TextCell":
        return cls(width=display_width(text), contents=((style, text),))

    @classmethod
    def blank(cls, style: Style) -> "TextCell":
        """Placeholder for an attribute that has no value, such as a directory's size."""
        return cls(width=1, contents=((style, BLANK_GLYPH),))

    @classmethod
    def spaces(cls, count: int) -> "TextCell":
        if count <= 0:
            return cls()
        return cls(width=count, contents=((Plain, " " * count),))

    @classmethod
    def concat(cls, cells: "list[TextCell] | tuple[TextCell, ...]") -> "TextCell":
        width = 0
        contents: list[tuple[Style, str]] = []
        for cell in cells:
            width += cell.width
            contents.extend(cell.contents)
        return cls(width=width, contents=tuple(contents))

    def __add__(self, other: "TextCell") -> "TextCell":
        if not isinstance(other, TextCell):
            return NotImplemented
        return TextCell(width=self.width + other.width, contents=self.contents + other.contents)

    def append(self, other: "TextCell") -> "TextCell":
        return self + other

    def add_spaces(self, count: int) -> "TextCell":
        return self + TextCell.spaces(count)

    def text(self) -> str:
        """Unstyled text of every fragment."""
        return "".join(text for _style, text in self.contents)

    def render(self) -> str:
        """Painted text of every fragment, in order."""
        return "".join(style.paint(text) for style, text in self.contents)

    def pad(self, target_width: int, alignment: Alignment) -> str:
        """Render padded to ``target_width`` columns; padding never comes from painted length."""
        padding = " " * max(0, target_width - self.width)
        if alignment is Alignment.RIGHT:
            return padding + self.render()
        return self.render() + padding


__all__ = ["Alignment", "BLANK_GLYPH", "TextCell"]
