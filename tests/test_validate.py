import pytest

from knightstour.core.board import Board
from knightstour.core.errors import TourValidationError
from knightstour.core.search import attempt_tour
from knightstour.core.validate import check_tour, is_knight_move, tour_path


def _solved(size=6):
    board = Board.create(size)
    board.mark_start(0, 0)
    assert attempt_tour(board, 0, 0)
    return board


def test_is_knight_move():
    assert is_knight_move((0, 0), (1, 2))
    assert is_knight_move((4, 4), (2, 3))
    assert not is_knight_move((0, 0), (1, 1))
    assert not is_knight_move((0, 0), (0, 0))


def test_tour_path_orders_by_move_index():
    board = _solved()
    path = tour_path(board)
    assert [board.get(r, c) for r, c in path] == list(range(1, 37))


def test_unfinished_board_is_rejected():
    board = Board.create(5)
    board.mark_start(0, 0)
    with pytest.raises(TourValidationError):
        tour_path(board)


def test_duplicate_index_is_rejected():
    board = _solved()
    board.set(5, 5, board.get(0, 0))
    with pytest.raises(TourValidationError):
        tour_path(board)


def test_broken_adjacency_is_rejected():
    board = _solved()
    path = tour_path(board)
    # swapping neighbours in the tour puts two same-coloured squares next to each other
    a, b = path[10], path[11]
    board.set(*a, 12)
    board.set(*b, 11)
    with pytest.raises(TourValidationError):
        check_tour(board)
