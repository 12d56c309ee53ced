"""Padded chess board.

The interior is addressed with logical coordinates: ``(0, 0)`` is the
top-left playable square and ``(size - 1, size - 1)`` the bottom-right one.
A ring of ``Cell.BLOCKED`` cells at least two deep surrounds the interior,
so a knight offset applied to any interior square always lands on a valid
index of the underlying grid. ``get`` and ``set`` therefore skip bounds
checks entirely.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .errors import InvalidBorderError, InvalidSizeError, SearchPreconditionError
from .model import MIN_BORDER, MIN_SIZE, Cell, Coord


class Board:
    def __init__(self, size: int, border_width: int = MIN_BORDER) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < MIN_SIZE:
            raise InvalidSizeError(size)
        if isinstance(border_width, bool) or not isinstance(border_width, int) or border_width < MIN_BORDER:
            raise InvalidBorderError(border_width)
        self.size = size
        self.border_width = border_width
        span = size + 2 * border_width
        self._grid: List[List[int]] = [[int(Cell.BLOCKED)] * span for _ in range(span)]
        self.clear()

    @classmethod
    def create(cls, size: int, border_width: int = MIN_BORDER) -> "Board":
        return cls(size, border_width)

    def get(self, row: int, col: int) -> int:
        return self._grid[row + self.border_width][col + self.border_width]

    def set(self, row: int, col: int, value: int) -> None:
        self._grid[row + self.border_width][col + self.border_width] = value

    def unmark(self, row: int, col: int) -> None:
        self._grid[row + self.border_width][col + self.border_width] = int(Cell.UNVISITED)

    def total_playable_cells(self) -> int:
        return self.size * self.size

    def is_interior(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def interior_cells(self) -> Iterator[Coord]:
        """Yield interior coordinates in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield row, col

    def rows(self) -> List[List[int]]:
        """Interior values row by row, border excluded."""
        b = self.border_width
        return [list(r[b:b + self.size]) for r in self._grid[b:b + self.size]]

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(r) for r in self.rows())

    def copy(self) -> "Board":
        other = Board(self.size, self.border_width)
        other._grid = [list(r) for r in self._grid]
        return other

    def clear(self) -> None:
        for row, col in self.interior_cells():
            self.unmark(row, col)

    def mark_start(self, row: int, col: int) -> None:
        """Reset the interior and place move index 1 on ``(row, col)``."""
        if not self.is_interior(row, col):
            raise SearchPreconditionError(f"start square {(row, col)} is off the board")
        self.clear()
        self.set(row, col, 1)

    def __repr__(self) -> str:
        return f"Board(size={self.size}, border_width={self.border_width})"
