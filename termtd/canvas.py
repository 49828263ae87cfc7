"""An in-memory character grid that the game draws on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

Color = Union[str, Tuple[int, int, int]]

BLANK = " "
OUTSIDE = ""


@dataclass(frozen=True)
class Style:
    """Foreground and background colours of a cell; None means terminal default."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None


@dataclass(frozen=True)
class Cell:
    """One character on the canvas together with its style."""

    ch: str = BLANK
    style: Style = field(default_factory=Style)


class Canvas:
    """A fixed-size grid of cells addressed by column ``x`` and row ``y``.

    Writes outside the grid are ignored; reads outside it return a cell whose
    character is the empty string.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        self._rows: List[List[Cell]] = []
        self.clear()

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_content(self, x: int, y: int, ch: str, style: Optional[Style] = None) -> None:
        """Put ``ch`` at column ``x``, row ``y``."""
        if self._inside(x, y):
            self._rows[y][x] = Cell(ch, style if style is not None else Style())

    def get_content(self, x: int, y: int) -> Cell:
        """Return the cell at column ``x``, row ``y``."""
        if self._inside(x, y):
            return self._rows[y][x]
        return Cell(OUTSIDE, Style())

    def clear(self) -> None:
        """Reset every cell to a blank with the default style."""
        blank = Cell()
        self._rows = [[blank] * self.width for _ in range(self.height)]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield ``(x, y, cell)`` for every cell, row by row."""
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                yield x, y, cell