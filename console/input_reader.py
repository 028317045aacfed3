"""
Console input for the TicTacToe game.
Reads human moves and seat choices from the keyboard.
"""

from typing import Callable, Optional, Tuple

from logic.board import Mark
from logic.players import PlayerKind

from .config import ConsoleConfig


class ConsoleInput:
    """
    Reads a human player's coordinates from the console.

    Accepts input like "2 3", "2,3" or "23": the first character is the
    row and the last the column, both 1-3. Out-of-range or unreadable input
    is rejected here; whether the cell is free is checked by the player.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        read: Callable[[], str] = input,
        output: Callable[[str], None] = print
    ):
        """
        Initialize the console input.

        Args:
            config: Console configuration. Uses defaults if not provided.
            read: Returns one line of user input (input() by default).
            output: Where prompts go (print by default).
        """
        self.config = config or ConsoleConfig()
        self.read = read
        self.output = output

    def read_move(self, mark: Mark) -> Tuple[int, int]:
        """
        Prompt until a coordinate in range is entered.

        Returns:
            (row, col), 0-based.
        """
        while True:
            self.output(self.config.MOVE_PROMPT.format(mark=mark.name))
            cell = self.parse_move(self.read())
            if cell is not None:
                return cell
            self.output(self.config.ILLEGAL_MOVE_MESSAGE)

    def report_illegal(self, message: str):
        self.output(self.config.ILLEGAL_MOVE_MESSAGE)
        if self.config.DEBUG_MODE:
            self.output(f"  ({message})")

    def parse_move(self, text: str) -> Optional[Tuple[int, int]]:
        """
        Parse "row col" typed by a human.

        Returns:
            0-based (row, col), or None if the text is not a valid coordinate.
        """
        text = text.strip()
        if not text:
            return None

        row = self._parse_coordinate(text[0])
        col = self._parse_coordinate(text[-1])
        if row is None or col is None:
            return None

        return row - 1, col - 1

    def _parse_coordinate(self, ch: str) -> Optional[int]:
        if not ch.isdecimal():
            return None
        value = int(ch)
        if self.config.MIN_COORDINATE <= value <= self.config.MAX_COORDINATE:
            return value
        return None


def ask_player_kind(
    mark: Mark,
    config: Optional[ConsoleConfig] = None,
    read: Callable[[], str] = input,
    output: Callable[[str], None] = print
) -> PlayerKind:
    """
    Ask who sits in a seat.

    Args:
        mark: The seat being filled.
        config: Console configuration. Uses defaults if not provided.
        read: Returns one line of user input.
        output: Where prompts go.

    Returns:
        The chosen PlayerKind.
    """
    config = config or ConsoleConfig()

    while True:
        output(config.SEAT_PROMPT.format(mark=mark.name))
        answer = read().strip().lower()
        choice = config.SEAT_CHOICES.get(answer)
        if choice is not None:
            return PlayerKind(choice)
        output(config.INVALID_SEAT_MESSAGE)
