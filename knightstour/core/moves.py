"""Knight move generation with Warnsdorff ordering and orphan lookahead."""

from __future__ import annotations

from typing import List

from .board import Board
from .model import KNIGHT_MOVES, Candidate, Cell


def degree(board: Board, row: int, col: int) -> int:
    """Number of unvisited squares one knight move away from ``(row, col)``."""
    num = 0
    for d_row, d_col in KNIGHT_MOVES:
        if board.get(row + d_row, col + d_col) == Cell.UNVISITED:
            num += 1
    return num


def candidates(board: Board, row: int, col: int) -> List[Candidate]:
    """Unvisited knight neighbours of ``(row, col)``, fewest onward moves first.

    ``sorted`` is stable, so neighbours of equal degree keep the order of
    ``KNIGHT_MOVES``.
    """
    found = []
    for d_row, d_col in KNIGHT_MOVES:
        r, c = row + d_row, col + d_col
        if board.get(r, c) == Cell.UNVISITED:
            found.append(Candidate(r, c, degree(board, r, c)))
    return sorted(found, key=lambda cand: cand.degree)


def orphan_detected(board: Board, row: int, col: int, move_index: int, total: int) -> bool:
    """True if placing ``move_index`` on ``(row, col)`` strands a neighbour.

    A neighbour left with no unvisited squares around it could only be
    entered as the very last move, so the check is skipped for the final
    two moves.
    """
    if move_index >= total - 1:
        return False
    for d_row, d_col in KNIGHT_MOVES:
        r, c = row + d_row, col + d_col
        if board.get(r, c) == Cell.UNVISITED and degree(board, r, c) == 0:
            return True
    return False
