"""Setup glue around the search: board creation, start squares, retries."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board
from .errors import SearchPreconditionError
from .model import MIN_BORDER, Coord
from .search import SearchStats, attempt_tour
from .validate import tour_path

logger = logging.getLogger(__name__)


@dataclass
class TourResult:
    size: int
    start: Coord
    found: bool
    board: Board
    stats: SearchStats = field(default_factory=SearchStats)
    attempts: int = 1

    def path(self) -> List[Coord]:
        if not self.found:
            return [self.start]
        return tour_path(self.board)


def choose_start(size: int, rng: random.Random) -> Coord:
    """Uniformly random interior square."""
    return rng.randrange(size), rng.randrange(size)


def run_tour(
    size: int,
    start: Optional[Coord] = None,
    border: int = MIN_BORDER,
    strategy: str = "auto",
    seed: Optional[int] = None,
    max_attempts: int = 1,
) -> TourResult:
    """Search for a tour, retrying from fresh random squares on failure.

    The first attempt starts on ``start`` (or a random square). Each further
    attempt, up to ``max_attempts``, starts on a square not tried before, on
    its own board. The result of the last attempt is returned.
    """
    if max_attempts < 1:
        raise SearchPreconditionError(f"max_attempts must be at least 1, got {max_attempts}")
    rng = random.Random(seed)
    board = Board.create(size, border)
    if start is None:
        start = choose_start(size, rng)
    elif not board.is_interior(*start):
        raise SearchPreconditionError(f"start square {tuple(start)} is off the {size}x{size} board")
    start = (int(start[0]), int(start[1]))

    untried = [cell for cell in board.interior_cells() if cell != start]
    rng.shuffle(untried)
    attempts = min(max_attempts, board.total_playable_cells())

    result = None
    for attempt in range(1, attempts + 1):
        if attempt > 1:
            board = Board.create(size, border)
            start = untried.pop()
        board.mark_start(*start)
        stats = SearchStats()
        found = attempt_tour(board, start[0], start[1], strategy=strategy, stats=stats)
        result = TourResult(size, start, found, board, stats, attempt)
        logger.info("attempt %d from %s: %s", attempt, start, "tour found" if found else "no tour")
        if found:
            break
    return result
