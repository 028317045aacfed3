"""
Main orchestration script for the TicTacToe console game.

This script ties together:
- Console (board drawing, keyboard input, seat setup)
- Logic (board, outcome checks, minimax search, players)

Run this script to play TicTacToe in the terminal!
"""

from typing import Optional

import numpy as np

# Console imports
from console.config import ConsoleConfig
from console.renderer import BoardRenderer
from console.input_reader import ConsoleInput, ask_player_kind

# Logic imports
from logic.board import Mark
from logic.game import Game
from logic.minimax import MinimaxSearch, SearchConfig
from logic.players import PlayerKind, create_player
from logic.win_checker import Outcome


class TicTacToeConsole:
    """
    Main controller for a console game.

    Game flow:
    1. Each seat is filled by a human, random, or computer player
    2. X moves first, then the seats alternate
    3. Every move is announced and the board redrawn
    4. The game stops on a win or a full board
    """

    def __init__(
        self,
        x_kind: PlayerKind,
        o_kind: PlayerKind,
        seed: Optional[int] = None,
        console_config: Optional[ConsoleConfig] = None,
        search_config: Optional[SearchConfig] = None
    ):
        """
        Initialize the console game.

        Args:
            x_kind: Who plays X.
            o_kind: Who plays O.
            seed: Seed for random players, for reproducible games.
            console_config: Console settings.
            search_config: Minimax settings.
        """
        self.console_config = console_config or ConsoleConfig()
        self.renderer = BoardRenderer(self.console_config)
        self.input = ConsoleInput(self.console_config)

        # One search shared by both seats so remembered positions are reused
        search = MinimaxSearch(search_config)
        rng = np.random.default_rng(seed)

        player_x = create_player(x_kind, Mark.X, rng=rng, search=search, input_source=self.input)
        player_o = create_player(o_kind, Mark.O, rng=rng, search=search, input_source=self.input)

        self.game = Game(player_x, player_o, on_move=self.renderer.on_move)

    def start(self) -> Outcome:
        """Play the game and print the result."""
        self.renderer.show_board(self.game.state.board)
        outcome = self.game.play()
        self.renderer.announce_result(self.game.state)
        return outcome


def main():
    """Main entry point."""
    import argparse

    kinds = [kind.value for kind in PlayerKind]

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--x",
        choices=kinds,
        help="Who plays X (asked interactively if omitted)"
    )
    parser.add_argument(
        "--o",
        choices=kinds,
        help="Who plays O (asked interactively if omitted)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for random players"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Don't pause after drawing each board"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search statistics"
    )

    args = parser.parse_args()

    console_config = ConsoleConfig()
    search_config = SearchConfig()
    if args.no_delay:
        console_config.MOVE_DELAY_SECONDS = 0
    if args.debug:
        console_config.DEBUG_MODE = True
        search_config.DEBUG_MODE = True

    try:
        x_kind = PlayerKind(args.x) if args.x else ask_player_kind(Mark.X, console_config)
        o_kind = PlayerKind(args.o) if args.o else ask_player_kind(Mark.O, console_config)

        game = TicTacToeConsole(
            x_kind,
            o_kind,
            seed=args.seed,
            console_config=console_config,
            search_config=search_config
        )
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
