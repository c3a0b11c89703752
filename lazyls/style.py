"""Composable terminal styles and ANSI painting.

There are three shapes of style: ``Plain`` (no formatting), ``Foreground``
(a colour and nothing else), and ``Composite`` for anything more involved.
Composition always returns a new style; the receiver is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ESC = "\033["
RESET = "\033[0m"


class _ColourOps:
    """Shortcuts that let a colour act as a style without ``.normal()``."""

    @property
    def foreground_code(self) -> str:
        raise NotImplementedError

    @property
    def background_code(self) -> str:
        raise NotImplementedError

    def paint(self, text: str) -> str:
        return f"{ESC}{self.foreground_code}m{text}{RESET}"

    def normal(self) -> "Composite":
        return Composite(foreground=self)

    def bold(self) -> "Composite":
        return Composite(foreground=self, is_bold=True)

    def underline(self) -> "Composite":
        return Composite(foreground=self, is_underline=True)

    def on(self, background: "ColourLike") -> "Composite":
        return Composite(foreground=self, background=background)


class Colour(_ColourOps, Enum):
    """The eight standard terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7

    @property
    def foreground_code(self) -> str:
        return str(30 + self.value)

    @property
    def background_code(self) -> str:
        return str(40 + self.value)


@dataclass(frozen=True)
class Fixed(_ColourOps):
    """One of the 256 indexed colours. Indexes 0-15 follow the user's terminal palette."""

    number: int

    @property
    def foreground_code(self) -> str:
        return f"38;5;{self.number}"

    @property
    def background_code(self) -> str:
        return f"48;5;{self.number}"


ColourLike = Colour | Fixed

Black = Colour.BLACK
Red = Colour.RED
Green = Colour.GREEN
Yellow = Colour.YELLOW
Blue = Colour.BLUE
Purple = Colour.PURPLE
Cyan = Colour.CYAN
White = Colour.WHITE


class Style:
    """Base for every style shape.

    ``bold()`` clears underline, ``underline()`` clears bold, and ``on()``
    clears both. Only the colours survive composition.
    """

    def _colours(self) -> tuple[ColourLike, ColourLike | None]:
        raise NotImplementedError

    def paint(self, text: str) -> str:
        raise NotImplementedError

    def bold(self) -> "Composite":
        foreground, background = self._colours()
        return Composite(foreground=foreground, background=background, is_bold=True)

    def underline(self) -> "Composite":
        foreground, background = self._colours()
        return Composite(foreground=foreground, background=background, is_underline=True)

    def on(self, background: ColourLike) -> "Composite":
        foreground, _background = self._colours()
        return Composite(foreground=foreground, background=background)


@dataclass(frozen=True)
class _Plain(Style):
    def _colours(self) -> tuple[ColourLike, ColourLike | None]:
        return White, None

    def paint(self, text: str) -> str:
        return text

    def __repr__(self) -> str:
        return "Plain"


Plain = _Plain()


@dataclass(frozen=True)
class Foreground(Style):
    colour: ColourLike

    def _colours(self) -> tuple[ColourLike, ColourLike | None]:
        return self.colour, None

    def paint(self, text: str) -> str:
        return self.colour.paint(text)


@dataclass(frozen=True)
class Composite(Style):
    foreground: ColourLike
    background: ColourLike | None = None
    is_bold: bool = False
    is_underline: bool = False

    def _colours(self) -> tuple[ColourLike, ColourLike | None]:
        return self.foreground, self.background

    def paint(self, text: str) -> str:
        bold = "1;" if self.is_bold else ""
        underline = "4;" if self.is_underline else ""
        background = f"{self.background.background_code};" if self.background is not None else ""
        return f"{ESC}{bold}{underline}{background}{self.foreground.foreground_code}m{text}{RESET}"


__all__ = [
    "Colour",
    "ColourLike",
    "Fixed",
    "Style",
    "Plain",
    "Foreground",
    "Composite",
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Purple",
    "Cyan",
    "White",
    "RESET",
]
