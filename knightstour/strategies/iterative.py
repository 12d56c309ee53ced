"""Backtracking on an explicit stack.

Visits candidates in exactly the order of the recursive strategy and keeps
the same counters, but the depth of the tour is bounded by memory instead
of the interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from knightstour.core.model import Candidate
from knightstour.core.moves import candidates, orphan_detected

from . import SearchStrategy, register_strategy


@dataclass
class _Frame:
    options: List[Candidate]
    move_index: int
    next_option: int = 0
    placed: Optional[Candidate] = None


@register_strategy
class IterativeStrategy(SearchStrategy):
    name = "iterative"

    def solve(self, board, row, col, stats):
        total = board.total_playable_cells()
        if total < 2:
            return True

        stack = [_Frame(candidates(board, row, col), 2)]
        while stack:
            frame = stack[-1]
            if frame.placed is not None:
                board.unmark(frame.placed.row, frame.placed.col)
                stats.backtracks += 1
                frame.placed = None
            if frame.next_option >= len(frame.options):
                stack.pop()
                continue

            cand = frame.options[frame.next_option]
            frame.next_option += 1
            move_index = frame.move_index
            board.set(cand.row, cand.col, move_index)
            frame.placed = cand
            stats.placements += 1
            if orphan_detected(board, cand.row, cand.col, move_index, total):
                stats.orphan_prunes += 1
                continue
            if move_index + 1 > total:
                return True
            # an empty frame pops straight away, which undoes ``cand``
            stack.append(_Frame(candidates(board, cand.row, cand.col), move_index + 1))

        return False
