"""Logical cell grid holding occupants and background colors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Protocol, Sequence

from .utils import BLACK, Color


class Occupant(Enum):
    """Logical content of a grid cell."""

    EMPTY = "empty"
    PLAYER = "player"
    OBSTACLE = "obstacle"
    REWARD = "reward"


class OutOfBoundsError(IndexError):
    """Raised when a grid location outside the board is accessed."""


class GridObserver(Protocol):
    """Receiver of per-cell changes, usually the rendering collaborator."""

    def show_occupant(self, row: int, col: int, occupant: Occupant) -> None: ...

    def show_color(self, row: int, col: int, color: Color) -> None: ...


class DisplaySink(GridObserver, Protocol):
    """Narrow interface the core uses to surface state changes."""

    def set_title(self, text: str) -> None: ...


@dataclass(slots=True)
class Cell:
    """Single board square."""

    occupant: Occupant = Occupant.EMPTY
    color: Color = BLACK


class Grid:
    """Fixed-size rectangular board of cells addressed by (row, col).

    The grid owns every cell for its whole lifetime; dimensions never change
    after construction. An optional observer is told about every write so a
    display can redraw the affected cell.
    """

    def __init__(self, rows: int, cols: int, observer: GridObserver | None = None) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self._cells = [[Cell() for _ in range(cols)] for _ in range(rows)]
        self.observer = observer

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def cols(self) -> int:
        return len(self._cells[0])

    def is_valid(self, row: int, col: int) -> bool:
        """Check whether a location lies inside the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _cell(self, row: int, col: int, action: str) -> Cell:
        if not self.is_valid(row, col):
            raise OutOfBoundsError(f"Cannot {action} invalid location {row}, {col}")
        return self._cells[row][col]

    def get_occupant(self, row: int, col: int) -> Occupant:
        """Return the occupant at a location."""
        return self._cell(row, col, "get occupant of").occupant

    def set_occupant(self, row: int, col: int, occupant: Occupant) -> None:
        """Overwrite the occupant at a location; the last write wins."""
        self._cell(row, col, f"set occupant {occupant.value} at").occupant = occupant
        if self.observer is not None:
            self.observer.show_occupant(row, col, occupant)

    def get_color(self, row: int, col: int) -> Color:
        """Return the background color at a location."""
        return self._cell(row, col, "get color of").color

    def set_color(self, row: int, col: int, color: Color) -> None:
        """Set the background color at a location."""
        self._cell(row, col, f"set color {color} at").color = color
        if self.observer is not None:
            self.observer.show_color(row, col, color)

    def set_background(self, color: Color) -> None:
        """Paint every cell with the same background color."""
        for row in range(self.rows):
            for col in range(self.cols):
                self.set_color(row, col, color)

    def apply_colors(self, colors: Sequence[Sequence[Color]]) -> None:
        """Paint the background from a rows x cols color matrix."""
        if len(colors) != self.rows or any(len(line) != self.cols for line in colors):
            raise ValueError(f"Color matrix does not match a {self.rows}x{self.cols} grid")
        for row, line in enumerate(colors):
            for col, color in enumerate(line):
                self.set_color(row, col, color)

    def positions_of(self, occupant: Occupant) -> Iterator[tuple[int, int]]:
        """Yield every location currently holding the given occupant, row-major."""
        for row, line in enumerate(self._cells):
            for col, cell in enumerate(line):
                if cell.occupant is occupant:
                    yield row, col
