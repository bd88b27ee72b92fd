"""Style state carried through one ANSI parse pass."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union


@dataclass(frozen=True)
class BasicColor:
    """One of the 16 theme-controlled color slots."""

    index: int


@dataclass(frozen=True)
class CustomColor:
    """An explicit RGB color carried by the escape sequence itself."""

    r: int
    g: int
    b: int

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


ColorSpec = Union[BasicColor, CustomColor]


@dataclass
class StyleState:
    bold: bool = False
    italic: bool = False
    underline: bool = False
    foreground: ColorSpec | None = None
    background: ColorSpec | None = None

    def reset(self) -> None:
        self.bold = False
        self.italic = False
        self.underline = False
        self.foreground = None
        self.background = None

    def copy(self) -> StyleState:
        """Return an independent snapshot of this state."""
        return replace(self)

