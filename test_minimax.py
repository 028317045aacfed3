"""
Tests for the minimax search.
"""

import sys

import pytest

from logic.board import Board, Mark
from logic.minimax import InvalidCallContext, MinimaxSearch, SearchConfig
from logic.win_checker import WinChecker


class NoShortcutConfig(SearchConfig):
    FIRST_MOVE_SHORTCUT = False


class NoCacheConfig(SearchConfig):
    USE_CACHE = False


@pytest.fixture(scope="module")
def search():
    # Shared so the remembered positions carry over between tests
    return MinimaxSearch()


def side_to_move(board: Board) -> Mark:
    return Mark.X if board.count(Mark.X) == board.count(Mark.O) else Mark.O


def reachable_boards():
    """Every distinct board reachable by alternating play from X."""
    checker = WinChecker()
    seen = {}
    stack = [Board.empty()]
    while stack:
        board = stack.pop()
        if board.key() in seen:
            continue
        seen[board.key()] = board
        if checker.evaluate(board).is_terminal:
            continue
        mark = side_to_move(board)
        for row, col in board.empty_cells():
            child = board.clone()
            child.set(row, col, mark)
            stack.append(child)
    return list(seen.values())


ALL_BOARDS = reachable_boards()


def test_reachable_board_count():
    # Well-known count of legal tic-tac-toe positions
    assert len(ALL_BOARDS) == 5478


def test_move_count_invariant():
    for board in ALL_BOARDS:
        assert board.count(Mark.X) - board.count(Mark.O) in (0, 1)


def test_empty_board_shortcut(search):
    move = search.best_move(Board.empty(), Mark.X)
    assert move == (0, 0)
    assert search.positions_evaluated == 0


def test_empty_board_without_shortcut_picks_top_left():
    search = MinimaxSearch(NoShortcutConfig())
    assert search.best_move(Board.empty(), Mark.X) == (0, 0)
    assert search.positions_evaluated > 0
    assert search.minimax(Board.empty(), True) == 0


def test_takes_immediate_win(search):
    board = Board.from_rows(["XX ", "OO ", "   "])
    assert search.best_move(board, Mark.X) == (0, 2)


def test_o_takes_win_over_earlier_cells(search):
    board = Board.from_rows(["XX ", "OO ", "X  "])
    assert search.best_move(board, Mark.O) == (1, 2)


def test_o_blocks_threat(search):
    board = Board.from_rows(["X  ", " O ", "X  "])
    assert search.best_move(board, Mark.O) == (1, 0)


def test_search_does_not_modify_board(search):
    board = Board.from_rows(["X  ", " O ", "   "])
    before = board.clone()
    search.best_move(board, Mark.X)
    search.minimax(board, True)
    assert board == before


def test_terminal_board_raises(search):
    won = Board.from_rows(["XXX", "OO ", "   "])
    full = Board.from_rows(["XOX", "OXO", "OXO"])
    with pytest.raises(InvalidCallContext):
        search.best_move(won, Mark.O)
    with pytest.raises(InvalidCallContext):
        search.best_move(full, Mark.X)


def test_best_move_is_optimal_everywhere(search):
    checker = WinChecker()
    for board in ALL_BOARDS:
        if checker.evaluate(board).is_terminal:
            continue
        mark = side_to_move(board)
        move = search.best_move(board, mark)
        assert board.get(*move) is None

        child = board.clone()
        child.set(move.row, move.col, mark)
        assert search.minimax(child, mark == Mark.O) == search.minimax(board, mark == Mark.X)


def test_ties_go_to_earliest_cell(search):
    checker = WinChecker()
    for board in ALL_BOARDS:
        if checker.evaluate(board).is_terminal or board.is_empty():
            continue
        mark = side_to_move(board)
        values = search.evaluate_moves(board, mark)
        best = max(values.values()) if mark == Mark.X else min(values.values())
        first_optimal = next(move for move, value in values.items() if value == best)
        assert search.best_move(board, mark) == first_optimal


def test_cache_does_not_change_moves(search):
    uncached = MinimaxSearch(NoCacheConfig())
    for rows in (["X  ", " O ", "   "], ["XO ", "   ", "  X"], [" X ", " O ", "   "]):
        board = Board.from_rows(rows)
        mark = side_to_move(board)
        assert uncached.best_move(board, mark) == search.best_move(board, mark)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
