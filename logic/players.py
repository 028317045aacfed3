"""
Players for the TicTacToe engine.

Three kinds of player fill a seat:
- RandomPlayer: picks a random empty cell
- ComputerPlayer: plays the minimax best move
- HumanPlayer: asks an input source and re-asks until the move is legal
"""

from enum import Enum
from typing import Optional, Protocol, Tuple, Union
from dataclasses import dataclass, field

import numpy as np

from .board import BOARD_SIZE, Board, Mark, Move
from .minimax import InvalidCallContext, MinimaxSearch
from .move_validator import MoveValidator


class PlayerKind(Enum):
    """How a seat chooses its moves."""
    HUMAN = "human"
    COMPUTER = "computer"
    RANDOM = "random"


class MoveSource(Protocol):
    """Where a human player's coordinates come from (e.g. the console)."""

    def read_move(self, mark: Mark) -> Tuple[int, int]:
        ...

    def report_illegal(self, message: str) -> None:
        ...


@dataclass
class RandomPlayer:
    """
    Plays a uniformly random empty cell.

    The random generator is passed in so games can be replayed from a seed.
    """
    mark: Mark
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    kind = PlayerKind.RANDOM
    label = "Computer"

    def move(self, board: Board) -> Move:
        if board.is_full():
            raise InvalidCallContext("No empty cells left to play")

        while True:
            row, col = (int(v) for v in self.rng.integers(0, BOARD_SIZE, size=2))
            if board.get(row, col) is None:
                return Move(row, col)


@dataclass
class ComputerPlayer:
    """Plays the best move found by exhaustive minimax."""
    mark: Mark
    search: MinimaxSearch = field(default_factory=MinimaxSearch)
    kind = PlayerKind.COMPUTER
    label = "Computer"

    def move(self, board: Board) -> Move:
        # The search gets its own copy; the game's board is never touched
        return self.search.best_move(board.clone(), self.mark)


@dataclass
class HumanPlayer:
    """
    Asks an input source for a coordinate until it names an empty cell.

    Illegal coordinates are reported back to the source and re-requested,
    so move() never returns a move the board would reject.
    """
    mark: Mark
    input_source: MoveSource
    validator: MoveValidator = field(default_factory=MoveValidator)
    kind = PlayerKind.HUMAN
    label = "Player"

    def move(self, board: Board) -> Move:
        if board.is_full():
            raise InvalidCallContext("No empty cells left to play")

        while True:
            row, col = self.input_source.read_move(self.mark)
            result = self.validator.validate_move(board, row, col)
            if result.is_valid:
                return Move(row, col)
            self.input_source.report_illegal(result.error_message)


Player = Union[RandomPlayer, ComputerPlayer, HumanPlayer]


def create_player(
    kind: PlayerKind,
    mark: Mark,
    rng: Optional[np.random.Generator] = None,
    search: Optional[MinimaxSearch] = None,
    input_source: Optional[MoveSource] = None,
) -> Player:
    """
    Build a player for a seat.

    Args:
        kind: Which kind of player.
        mark: The mark the player places.
        rng: Random generator for a RANDOM player (fresh one if omitted).
        search: Search engine for a COMPUTER player (fresh one if omitted).
        input_source: Coordinate source, required for a HUMAN player.

    Returns:
        The player.
    """
    if kind == PlayerKind.RANDOM:
        return RandomPlayer(mark, rng if rng is not None else np.random.default_rng())
    if kind == PlayerKind.COMPUTER:
        return ComputerPlayer(mark, search or MinimaxSearch())
    if kind == PlayerKind.HUMAN:
        if input_source is None:
            raise ValueError("A human player needs an input source")
        return HumanPlayer(mark, input_source)
    raise ValueError(f"Unknown player kind: {kind!r}")
