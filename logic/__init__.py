"""
Logic module for the TicTacToe engine.
Handles the board, outcome checks, minimax search, players and the game loop.
"""

__version__ = "1.0.0"

from .board import Board, Mark, Move, IllegalMove
from .win_checker import Outcome, WinChecker
from .minimax import MinimaxSearch, SearchConfig, InvalidCallContext
from .move_validator import MoveValidator, ValidationResult
from .players import PlayerKind, RandomPlayer, ComputerPlayer, HumanPlayer, create_player
from .game_state import GameState, PlayedMove
from .game import Game
