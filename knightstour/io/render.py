"""Human and machine readable views of a search result."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from knightstour.core.board import Board
from knightstour.core.tour import TourResult

NO_RESULT = "no result"


def format_board(board: Board) -> str:
    """Interior squares as a right-aligned grid, one board row per line."""
    width = max(2, len(str(board.total_playable_cells())))
    return "\n".join(" ".join(str(v).rjust(width) for v in row) for row in board.rows())


def result_to_dict(result: TourResult) -> Dict[str, Any]:
    return {
        "size": result.size,
        "start": list(result.start),
        "found": result.found,
        "attempts": result.attempts,
        "stats": asdict(result.stats),
        "board": result.board.rows() if result.found else None,
        "path": [list(cell) for cell in result.path()],
    }
