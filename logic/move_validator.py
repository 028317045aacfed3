"""
Move validator for the TicTacToe engine.
Checks a requested coordinate without touching the board.
"""

from typing import Optional
from dataclasses import dataclass

from .board import BOARD_SIZE, Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be 0-2
    2. Can only place on empty cells

    Board.set enforces the same rules by raising; this class is for callers
    that want to re-ask instead, such as a human player.
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if row/col are in valid range
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
            )

        # Check if cell is empty
        occupant = board.get(row, col)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.name}"
            )

        return ValidationResult(is_valid=True)
