"""
Win checker for the TicTacToe engine.
Classifies a board as in progress, won by X, won by O, or tied.
"""

from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .board import BOARD_SIZE, EMPTY, Board, Mark


class Outcome(Enum):
    """Result of evaluating a board. Always derived, never stored."""
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    TIE = "tie"

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.IN_PROGRESS

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark for a decisive outcome, otherwise None."""
        if self == Outcome.X_WINS:
            return Mark.X
        if self == Outcome.O_WINS:
            return Mark.O
        return None

    @property
    def score(self) -> int:
        """
        Minimax score: +1 for an X win, -1 for an O win, 0 for a tie.

        Raises:
            ValueError: For IN_PROGRESS, which has no score.
        """
        if self == Outcome.IN_PROGRESS:
            raise ValueError("An in-progress board has no score")
        return _SCORES[self]

    @classmethod
    def win_for(cls, mark: Mark) -> "Outcome":
        return cls.X_WINS if mark == Mark.X else cls.O_WINS


_SCORES = {Outcome.X_WINS: 1, Outcome.O_WINS: -1, Outcome.TIE: 0}


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally).
    The checker keeps no state, so one instance can be shared freely.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def evaluate(self, board: Board) -> Outcome:
        """
        Classify the board.

        Args:
            board: The board to inspect.

        Returns:
            X_WINS / O_WINS if any line is complete, TIE if the board is
            full, IN_PROGRESS otherwise.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.win_for(winner)

        if board.is_full():
            return Outcome.TIE

        return Outcome.IN_PROGRESS

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Line sums are +3 for three X and -3 for three O. In a legal game at
        most one mark can own a line, so the checks need no priority order.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        grid = board.grid
        target = BOARD_SIZE

        sums = np.concatenate((grid.sum(axis=1), grid.sum(axis=0)))

        # A diagonal can only win through the centre
        if grid[1, 1] != EMPTY:
            diagonals = np.array([np.trace(grid), np.trace(np.fliplr(grid))])
            sums = np.concatenate((sums, diagonals))

        if np.any(sums == target):
            return Mark.X
        if np.any(sums == -target):
            return Mark.O
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw: board full and no winner.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            marks = {board.get(row, col) for row, col in line}
            if len(marks) == 1 and None not in marks:
                return line
        return None

    def leading_mark(self, board: Board) -> Mark:
        """
        The mark that moved last.

        Marks alternate starting with X, so X has moved last whenever it has
        more marks on the board. Used to name the winner in narration only.
        """
        return Mark.X if board.count(Mark.X) > board.count(Mark.O) else Mark.O

    def describe_result(self, board: Board) -> str:
        """
        Human-readable end-of-game text: "Tie!" or "Player X wins!".
        """
        outcome = self.evaluate(board)
        if outcome == Outcome.IN_PROGRESS:
            return "Game in progress."
        if outcome == Outcome.TIE:
            return "Tie!"
        return f"Player {self.leading_mark(board).name} wins!"
