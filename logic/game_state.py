"""
Game state management for the TicTacToe engine.
Tracks the board, the side to move, and the move history.
"""

from typing import List
from dataclasses import dataclass, field

from .board import Board, Mark, Move
from .win_checker import Outcome, WinChecker


@dataclass
class PlayedMove:
    """
    A move that has been applied to the board.
    """
    mark: Mark              # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Ply index, starting at 0


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 board
    - Whose turn it is (X always starts)
    - Move history

    The outcome is not stored; it is recomputed from the board on every
    access so it can never disagree with it.
    """

    board: Board = field(default_factory=Board.empty)
    current_mark: Mark = Mark.X
    moves: List[PlayedMove] = field(default_factory=list)
    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)

    @property
    def outcome(self) -> Outcome:
        return self.win_checker.evaluate(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    def apply(self, move: Move) -> PlayedMove:
        """
        Place the current side's mark and pass the turn.

        Args:
            move: The cell to play.

        Returns:
            The recorded PlayedMove.

        Raises:
            IllegalMove: If the cell is out of range or occupied.
        """
        row, col = move
        self.board.set(row, col, self.current_mark)

        played = PlayedMove(
            mark=self.current_mark,
            row=row,
            col=col,
            move_number=len(self.moves)
        )
        self.moves.append(played)

        self.current_mark = self.current_mark.opposite()
        return played

    def result_text(self) -> str:
        """End-of-game narration, e.g. "Player O wins!" or "Tie!"."""
        return self.win_checker.describe_result(self.board)
