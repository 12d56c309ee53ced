"""Search strategy registry and base class."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Dict, Type


@dataclass
class SearchStats:
    """Counters collected while searching; deterministic for a given start."""
    placements: int = 0
    backtracks: int = 0
    orphan_prunes: int = 0


class SearchStrategy:
    """Base strategy.

    ``solve`` receives a board whose start square already holds move index 1
    and continues the tour from move index 2. On failure the board must be
    left exactly as it was passed in.
    """
    name: str = "strategy"

    def solve(self, board, row: int, col: int, stats: SearchStats) -> bool:  # pragma: no cover - abstract
        raise NotImplementedError


STRATEGY_REGISTRY: Dict[str, Type[SearchStrategy]] = {}

# headroom for the caller's own frames when choosing the recursive strategy
RECURSION_HEADROOM = 100


def register_strategy(cls: Type[SearchStrategy]) -> Type[SearchStrategy]:
    STRATEGY_REGISTRY[cls.name] = cls
    return cls


def pick_strategy(name: str, total: int) -> SearchStrategy:
    """Instantiate the strategy called ``name``; ``auto`` chooses by depth."""
    if name == "auto":
        fits = total + RECURSION_HEADROOM < sys.getrecursionlimit()
        name = "recursive" if fits else "iterative"
    return STRATEGY_REGISTRY[name]()


from . import iterative, recursive  # noqa: E402,F401  (populate the registry)
