"""
Tests for the board, win checker and move validator.
"""

import sys

import pytest

from logic.board import Board, IllegalMove, Mark, Move
from logic.move_validator import MoveValidator
from logic.win_checker import Outcome, WinChecker


# ==================== BOARD ====================

def test_empty_board():
    board = Board.empty()
    assert board.is_empty()
    assert not board.is_full()
    assert len(board.empty_cells()) == 9
    assert all(board.get(r, c) is None for r in range(3) for c in range(3))


def test_set_and_get():
    board = Board.empty()
    board.set(1, 2, Mark.O)
    assert board.get(1, 2) == Mark.O
    assert board.count(Mark.O) == 1
    assert board.count(Mark.X) == 0


def test_set_on_occupied_cell_raises():
    board = Board.empty()
    board.set(0, 0, Mark.X)

    with pytest.raises(IllegalMove):
        board.set(0, 0, Mark.O)

    # Never overwritten
    assert board.get(0, 0) == Mark.X


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 3), (3, 3), (1, -1)])
def test_set_out_of_range_raises(row, col):
    board = Board.empty()
    with pytest.raises(IllegalMove):
        board.set(row, col, Mark.X)
    assert board.is_empty()


def test_empty_cells_are_row_major():
    board = Board.from_rows(["X O", " X ", "O  "])
    assert board.empty_cells() == [(0, 1), (1, 0), (1, 2), (2, 1), (2, 2)]
    assert all(isinstance(cell, Move) for cell in board.empty_cells())


def test_rows_columns_and_diagonals():
    board = Board.from_rows(["XO.", ".X.", "O.X"])
    assert board.row(0) == [Mark.X, Mark.O, None]
    assert board.column(0) == [Mark.X, None, Mark.O]
    main, anti = board.diagonals()
    assert main == [Mark.X, Mark.X, Mark.X]
    assert anti == [None, Mark.X, Mark.O]


def test_clone_is_independent():
    board = Board.from_rows(["X  ", " O ", "   "])
    copy = board.clone()
    copy.set(2, 2, Mark.X)

    assert board.get(2, 2) is None
    assert copy.get(2, 2) == Mark.X
    assert copy != board


def test_from_rows_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_rows(["XXX", "OO "])
    with pytest.raises(ValueError):
        Board.from_rows(["XXQ", "   ", "   "])


# ==================== WIN CHECKER ====================

def test_row_win_for_x():
    board = Board.from_rows(["XXX", "OO ", "   "])
    assert WinChecker().evaluate(board) == Outcome.X_WINS


def test_full_board_without_line_is_tie():
    board = Board.from_rows(["XOX", "OXO", "OXO"])
    assert WinChecker().evaluate(board) == Outcome.TIE


def test_diagonal_win_after_last_cell():
    checker = WinChecker()
    board = Board.from_rows(["XOO", "OX ", "O  "])
    assert checker.evaluate(board) == Outcome.IN_PROGRESS

    board.set(2, 2, Mark.X)
    assert checker.evaluate(board) == Outcome.X_WINS
    assert checker.get_winning_line(board) == [(0, 0), (1, 1), (2, 2)]


def test_column_and_anti_diagonal_wins_for_o():
    checker = WinChecker()
    column = Board.from_rows(["OX ", "OX ", "O X"])
    anti = Board.from_rows(["XXO", " O ", "O X"])
    assert checker.evaluate(column) == Outcome.O_WINS
    assert checker.evaluate(anti) == Outcome.O_WINS
    assert checker.check_winner(anti) == Mark.O


def test_empty_board_is_in_progress():
    checker = WinChecker()
    assert checker.evaluate(Board.empty()) == Outcome.IN_PROGRESS
    assert checker.get_winning_line(Board.empty()) is None
    assert not checker.check_draw(Board.empty())


def test_win_on_full_board_is_not_a_tie():
    board = Board.from_rows(["XOX", "OXO", "OXX"])
    checker = WinChecker()
    assert checker.evaluate(board) == Outcome.X_WINS
    assert not checker.check_draw(board)


def test_outcome_scores():
    assert Outcome.X_WINS.score == 1
    assert Outcome.O_WINS.score == -1
    assert Outcome.TIE.score == 0
    with pytest.raises(ValueError):
        Outcome.IN_PROGRESS.score
    assert Outcome.X_WINS.winner == Mark.X
    assert Outcome.TIE.winner is None


def test_leading_mark_and_result_text():
    checker = WinChecker()
    x_won = Board.from_rows(["XXX", "OO ", "   "])
    o_won = Board.from_rows(["OOO", "XX ", "X  "])
    tie = Board.from_rows(["XOX", "XOO", "OXX"])

    assert checker.leading_mark(x_won) == Mark.X
    assert checker.leading_mark(o_won) == Mark.O
    assert checker.describe_result(x_won) == "Player X wins!"
    assert checker.describe_result(o_won) == "Player O wins!"
    assert checker.describe_result(tie) == "Tie!"


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(Board.empty(), 1, 1)
    assert result.is_valid
    assert result.error_message is None


def test_validator_rejects_occupied_and_out_of_range():
    board = Board.empty()
    board.set(1, 1, Mark.X)
    validator = MoveValidator()

    occupied = validator.validate_move(board, 1, 1)
    assert not occupied.is_valid
    assert "occupied" in occupied.error_message

    outside = validator.validate_move(board, 5, 5)
    assert not outside.is_valid
    assert "Invalid position" in outside.error_message


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
