"""
Console module for the TicTacToe game.
Handles board drawing, keyboard input, and seat setup.
"""

from .config import ConsoleConfig
from .renderer import BoardRenderer
from .input_reader import ConsoleInput, ask_player_kind
