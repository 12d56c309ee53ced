"""Checks that a filled board describes an open knight's tour."""

from __future__ import annotations

from typing import List

from .board import Board
from .errors import TourValidationError
from .model import KNIGHT_MOVES, Coord


def is_knight_move(a: Coord, b: Coord) -> bool:
    return (b[0] - a[0], b[1] - a[1]) in KNIGHT_MOVES


def tour_path(board: Board) -> List[Coord]:
    """Interior squares ordered by the move index written on them."""
    total = board.total_playable_cells()
    path: List[Coord] = [None] * total  # type: ignore[list-item]
    for row, col in board.interior_cells():
        value = board.get(row, col)
        if not 1 <= value <= total:
            raise TourValidationError(f"square {(row, col)} holds {value}, expected 1..{total}")
        if path[value - 1] is not None:
            raise TourValidationError(f"move {value} appears on {path[value - 1]} and {(row, col)}")
        path[value - 1] = (row, col)
    return path


def check_tour(board: Board) -> List[Coord]:
    path = tour_path(board)
    for k in range(len(path) - 1):
        if not is_knight_move(path[k], path[k + 1]):
            raise TourValidationError(
                f"moves {k + 1} and {k + 2} ({path[k]} -> {path[k + 1]}) are not a knight move apart"
            )
    return path
