"""
Board renderer for the TicTacToe console game.
Draws the board and narrates moves and results.
"""

import time
from typing import Callable, Optional

from logic.board import Board, Mark, Move
from logic.game_state import GameState
from logic.players import Player

from .config import ConsoleConfig


class BoardRenderer:
    """
    Prints the board and game narration to the console.

    Coordinates are shown 1-based, the way humans type them.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        output: Callable[[str], None] = print,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the renderer.

        Args:
            config: Console configuration. Uses defaults if not provided.
            output: Where lines go (print by default).
            sleep: Pause function used after each board.
        """
        self.config = config or ConsoleConfig()
        self.output = output
        self.sleep = sleep

    def render(self, board: Board) -> str:
        """
        Draw the board as text.

                 1   2   3

             1   X | O |
                -----------
             2     | X |
                -----------
             3     |   | O
        """
        lines = ["", "     1   2   3", ""]

        for row_idx, row in enumerate(board.cells()):
            symbols = [f" {self._symbol(cell)} " for cell in row]
            lines.append(f" {row_idx + 1}  " + "|".join(symbols))
            if row_idx < len(board.cells()) - 1:
                lines.append("    -----------")

        lines.append("")
        return "\n".join(lines)

    def show_board(self, board: Board):
        self.output(self.render(board))
        if self.config.MOVE_DELAY_SECONDS > 0:
            self.sleep(self.config.MOVE_DELAY_SECONDS)

    def announce_move(self, player: Player, move: Move):
        """e.g. "Computer X plays row 1, column 1"."""
        self.output(
            f"{player.label} {player.mark.name} plays row {move.row + 1}, column {move.col + 1}"
        )

    def announce_result(self, state: GameState):
        """Print the result and, for a win, the cells that made it."""
        self.output(state.result_text())

        line = state.win_checker.get_winning_line(state.board)
        if line is not None:
            cells = " ".join(f"({row + 1}, {col + 1})" for row, col in line)
            self.output(f"Winning line: {cells}")

    def on_move(self, state: GameState, player: Player, move: Move):
        """Game callback: narrate the move, then draw the new board."""
        self.announce_move(player, move)
        self.show_board(state.board)

    def _symbol(self, cell: Optional[Mark]) -> str:
        if cell is None:
            return self.config.EMPTY_SYMBOL
        return self.config.X_SYMBOL if cell == Mark.X else self.config.O_SYMBOL
