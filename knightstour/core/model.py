from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class Cell(IntEnum):
    """Sentinel cell states. Positive values are move indices."""
    BLOCKED = -1
    UNVISITED = 0


Coord = Tuple[int, int]
Move = Tuple[int, int]

# (d_row, d_col); the order is the Warnsdorff tie-break order
KNIGHT_MOVES: Tuple[Move, ...] = (
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
)

MIN_SIZE = 5
MIN_BORDER = 2


@dataclass(frozen=True)
class Candidate:
    """An unvisited knight neighbour and its onward mobility."""
    row: int
    col: int
    degree: int

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)
