"""
Console configuration for the TicTacToe game.
All the settings for board drawing, prompts, and seat setup.
"""


class ConsoleConfig:
    """
    Configuration class for console settings.
    """

    # ==================== DISPLAY SETTINGS ====================
    # Pause after each board is drawn so a computer-vs-computer game
    # can be followed (seconds, 0 to disable)
    MOVE_DELAY_SECONDS = 1.0

    # What each cell looks like
    X_SYMBOL = "X"
    O_SYMBOL = "O"
    EMPTY_SYMBOL = " "

    # ==================== INPUT SETTINGS ====================
    # Humans type 1-based coordinates, e.g. "2 3" or "2,3"
    MIN_COORDINATE = 1
    MAX_COORDINATE = 3

    MOVE_PROMPT = "Player {mark}: Enter your move (row, col)"
    ILLEGAL_MOVE_MESSAGE = "Illegal move!"

    # ==================== SEAT SETUP ====================
    SEAT_PROMPT = "Player {mark}: human or computer?"
    INVALID_SEAT_MESSAGE = "Invalid input!"

    # Accepted answers for each kind of player
    SEAT_CHOICES = {
        "h": "human",
        "human": "human",
        "c": "computer",
        "computer": "computer",
        "r": "random",
        "random": "random",
    }

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
