"""
Game loop for the TicTacToe engine.

Alternates the two seats, X first, applying each returned move to the
board and re-evaluating the outcome after every ply.
"""

from typing import Callable, Optional

from .board import Mark, Move
from .game_state import GameState
from .minimax import InvalidCallContext
from .players import Player
from .win_checker import Outcome


MoveCallback = Callable[[GameState, Player, Move], None]


class Game:
    """
    Runs one game between two players.

    The game owns the board. Players only see it and return a Move; an
    IllegalMove raised while applying a computer or random player's move
    is a bug in that player and is left to propagate.
    """

    def __init__(
        self,
        player_x: Player,
        player_o: Player,
        on_move: Optional[MoveCallback] = None,
        state: Optional[GameState] = None
    ):
        """
        Initialize the game.

        Args:
            player_x: Player for the X seat.
            player_o: Player for the O seat.
            on_move: Called after every applied move (e.g. to render it).
            state: Starting state. A fresh empty board if not provided.
        """
        if player_x.mark != Mark.X:
            raise ValueError(f"X seat given a player for {player_x.mark.name}")
        if player_o.mark != Mark.O:
            raise ValueError(f"O seat given a player for {player_o.mark.name}")

        self.players = {Mark.X: player_x, Mark.O: player_o}
        self.on_move = on_move
        self.state = state or GameState()

    @property
    def current_player(self) -> Player:
        return self.players[self.state.current_mark]

    def play_turn(self) -> Outcome:
        """
        Play a single ply.

        Returns:
            The outcome after the move.

        Raises:
            InvalidCallContext: If the game is already over.
        """
        outcome = self.state.outcome
        if outcome.is_terminal:
            raise InvalidCallContext(f"Game is already over ({outcome.value})")

        player = self.current_player
        move = player.move(self.state.board.clone())
        self.state.apply(move)

        if self.on_move is not None:
            self.on_move(self.state, player, Move(*move))

        return self.state.outcome

    def play(self) -> Outcome:
        """
        Play until someone wins or the board fills up.

        Returns:
            The final outcome.
        """
        outcome = self.state.outcome
        while not outcome.is_terminal:
            outcome = self.play_turn()
        return outcome
