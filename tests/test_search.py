import pytest

from knightstour.core.board import Board
from knightstour.core.errors import SearchPreconditionError
from knightstour.core.search import SearchStats, attempt_tour
from knightstour.core.validate import check_tour
from knightstour.strategies import STRATEGY_REGISTRY, pick_strategy


def _started(size, row, col):
    board = Board.create(size)
    board.mark_start(row, col)
    return board


def test_eight_by_eight_from_corner():
    board = _started(8, 0, 0)
    stats = SearchStats()
    assert attempt_tour(board, 0, 0, stats=stats)
    path = check_tour(board)
    assert path[0] == (0, 0)
    assert len(path) == 64
    assert stats.placements - stats.backtracks == 63


def test_five_by_five_from_centre():
    board = _started(5, 2, 2)
    before = board.snapshot()
    if attempt_tour(board, 2, 2):
        path = check_tour(board)
        assert path[0] == (2, 2)
        assert sorted(v for row in board.rows() for v in row) == list(range(1, 26))
    else:
        assert board.snapshot() == before


def test_failure_rolls_board_back():
    # (0, 1) has the minority colour on 5x5, so no open tour starts there
    board = _started(5, 0, 1)
    before = board.snapshot()
    stats = SearchStats()
    assert not attempt_tour(board, 0, 1, stats=stats)
    assert board.snapshot() == before
    assert stats.placements > 0
    assert stats.backtracks == stats.placements


def test_search_is_deterministic():
    first, second = _started(6, 0, 0), _started(6, 0, 0)
    s1, s2 = SearchStats(), SearchStats()
    assert attempt_tour(first, 0, 0, stats=s1)
    assert attempt_tour(second, 0, 0, stats=s2)
    assert first.snapshot() == second.snapshot()
    assert s1 == s2


@pytest.mark.parametrize("size,start", [(5, (2, 2)), (6, (0, 0)), (7, (0, 0)), (8, (0, 0))])
def test_recursive_and_iterative_agree(size, start):
    outcomes = []
    for name in ("recursive", "iterative"):
        board = _started(size, *start)
        stats = SearchStats()
        found = attempt_tour(board, *start, strategy=name, stats=stats)
        outcomes.append((found, board.snapshot(), stats))
    assert outcomes[0] == outcomes[1]


def test_iterative_rolls_back_too():
    board = _started(5, 0, 1)
    before = board.snapshot()
    assert not attempt_tour(board, 0, 1, strategy="iterative")
    assert board.snapshot() == before


def test_boards_from_tours_keep_border_intact():
    board = _started(6, 5, 5)
    assert attempt_tour(board, 5, 5)
    assert board.get(-1, -1) == -1
    assert board.get(6, 3) == -1


def test_start_square_must_hold_one():
    board = Board.create(6)
    with pytest.raises(SearchPreconditionError):
        attempt_tour(board, 0, 0)


def test_start_square_must_be_on_board():
    board = _started(6, 0, 0)
    with pytest.raises(SearchPreconditionError):
        attempt_tour(board, -1, 0)


def test_unknown_strategy():
    board = _started(6, 0, 0)
    with pytest.raises(SearchPreconditionError):
        attempt_tour(board, 0, 0, strategy="bogus")


def test_auto_strategy_picks_by_depth():
    assert set(STRATEGY_REGISTRY) == {"recursive", "iterative"}
    assert pick_strategy("auto", 64).name == "recursive"
    assert pick_strategy("auto", 10 ** 7).name == "iterative"
