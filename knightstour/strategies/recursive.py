from __future__ import annotations

from knightstour.core.moves import candidates, orphan_detected

from . import SearchStats, SearchStrategy, register_strategy


@register_strategy
class RecursiveStrategy(SearchStrategy):
    """Depth-first backtracking, one Python frame per move."""
    name = "recursive"

    def solve(self, board, row, col, stats):
        return self._solve(board, row, col, 2, board.total_playable_cells(), stats)

    def _solve(self, board, row: int, col: int, move_index: int, total: int, stats: SearchStats) -> bool:
        if move_index > total:
            return True

        options = candidates(board, row, col)
        if not options and move_index != total:
            return False

        for cand in options:
            board.set(cand.row, cand.col, move_index)
            stats.placements += 1
            if orphan_detected(board, cand.row, cand.col, move_index, total):
                stats.orphan_prunes += 1
            elif self._solve(board, cand.row, cand.col, move_index + 1, total, stats):
                return True
            board.unmark(cand.row, cand.col)
            stats.backtracks += 1

        return False
