"""Entry point of the tour search.

``attempt_tour`` is the whole contract between the solver and its callers:
hand it a freshly created board whose start square holds move index 1 and
it either fills every interior square with ``1..size*size`` and returns
True, or returns False and leaves the board exactly as it received it.
"""

from __future__ import annotations

import logging
from typing import Optional

from knightstour.strategies import STRATEGY_REGISTRY, SearchStats, pick_strategy

from .board import Board
from .errors import SearchPreconditionError

logger = logging.getLogger(__name__)

STRATEGIES = ("auto",) + tuple(sorted(STRATEGY_REGISTRY))

__all__ = ["STRATEGIES", "SearchStats", "attempt_tour"]


def attempt_tour(
    board: Board,
    start_row: int,
    start_col: int,
    strategy: str = "auto",
    stats: Optional[SearchStats] = None,
) -> bool:
    if not board.is_interior(start_row, start_col):
        raise SearchPreconditionError(f"start square {(start_row, start_col)} is off the board")
    if board.get(start_row, start_col) != 1:
        raise SearchPreconditionError(
            f"start square {(start_row, start_col)} must hold move index 1, "
            f"found {board.get(start_row, start_col)}"
        )
    total = board.total_playable_cells()
    try:
        solver = pick_strategy(strategy, total)
    except KeyError:
        raise SearchPreconditionError(f"unknown search strategy {strategy!r}") from None

    if stats is None:
        stats = SearchStats()
    logger.debug("searching %dx%d from %s with %s", board.size, board.size, (start_row, start_col), solver.name)
    found = solver.solve(board, start_row, start_col, stats)
    logger.debug(
        "search %s after %d placements, %d backtracks, %d orphan prunes",
        "succeeded" if found else "exhausted",
        stats.placements,
        stats.backtracks,
        stats.orphan_prunes,
    )
    return found
