"""
Minimax search for the TicTacToe engine.
Explores every continuation of a position and picks the optimal move.
"""

from typing import Dict, Optional, Tuple

from .board import Board, Mark, Move
from .win_checker import Outcome, WinChecker


class InvalidCallContext(RuntimeError):
    """Raised when a move is requested on a board that is already decided."""


class SearchConfig:
    """
    Configuration for the minimax search.
    """

    # X on an empty board plays the top-left corner without searching.
    # Every first move draws under perfect play, so this only saves time.
    FIRST_MOVE_SHORTCUT = True

    # Remember minimax values by (board, side to move). Results are identical
    # with or without it.
    USE_CACHE = True

    # Print how many positions each best_move call evaluated
    DEBUG_MODE = False


# Best score reachable by each side
_BEST_SCORE = {Mark.X: 1, Mark.O: -1}


class MinimaxSearch:
    """
    Exhaustive minimax over the TicTacToe game tree.

    Scoring is fixed: X wins +1, O wins -1, tie 0. X is always the
    maximizing side and O the minimizing side, whoever asks for a move.
    There is no depth limit and no pruning; the tree is small enough.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize the search.

        Args:
            config: Search configuration. Uses defaults if not provided.
        """
        self.config = config or SearchConfig()
        self.win_checker = WinChecker()
        self._cache: Dict[Tuple[bytes, bool], int] = {}

        # How many positions the last best_move call evaluated (for debugging)
        self.positions_evaluated = 0

    def best_move(self, board: Board, mark: Mark) -> Move:
        """
        Get the best move for the side to move.

        Candidates are scanned in row-major order. The first one is kept
        unless a later one scores strictly better, so ties always go to the
        earliest cell.

        Args:
            board: Position to search. Never modified.
            mark: The side to move.

        Returns:
            The chosen Move.

        Raises:
            InvalidCallContext: If the board is already won, tied or full.
        """
        self.positions_evaluated = 0

        outcome = self.win_checker.evaluate(board)
        if outcome.is_terminal:
            raise InvalidCallContext(f"best_move called on a finished board ({outcome.value})")

        if self.config.FIRST_MOVE_SHORTCUT and mark == Mark.X and board.is_empty():
            return Move(0, 0)

        maximizing = mark == Mark.X
        target = _BEST_SCORE[mark]

        best_move = None
        best_score = None

        for move in board.empty_cells():
            child = board.clone()
            child.set(move.row, move.col, mark)
            score = self.minimax(child, not maximizing)

            if best_move is None or (score > best_score if maximizing else score < best_score):
                best_move = move
                best_score = score

            # Nothing can beat the best attainable score
            if score == target:
                break

        if self.config.DEBUG_MODE:
            print(f"Search evaluated {self.positions_evaluated} positions. "
                  f"Best move: {tuple(best_move)} (score: {best_score})")

        return best_move

    def minimax(self, board: Board, maximizing: bool) -> int:
        """
        Game-theoretic value of a position.

        Args:
            board: Position to evaluate. Never modified.
            maximizing: True if X is to move, False if O is.

        Returns:
            +1 if X forces a win, -1 if O does, 0 if best play ties.
        """
        self.positions_evaluated += 1

        outcome = self.win_checker.evaluate(board)
        if outcome.is_terminal:
            return outcome.score

        if self.config.USE_CACHE:
            key = (board.key(), maximizing)
            cached = self._cache.get(key)
            if cached is not None:
                return cached

        mark = Mark.X if maximizing else Mark.O
        scores = []
        for move in board.empty_cells():
            child = board.clone()
            child.set(move.row, move.col, mark)
            scores.append(self.minimax(child, not maximizing))

        value = max(scores) if maximizing else min(scores)

        if self.config.USE_CACHE:
            self._cache[key] = value

        return value

    def evaluate_moves(self, board: Board, mark: Mark) -> Dict[Move, int]:
        """
        Minimax value of every legal move for the side to move.

        Useful for hints and analysis; best_move is the one to play.
        """
        if self.win_checker.evaluate(board).is_terminal:
            raise InvalidCallContext("evaluate_moves called on a finished board")

        values = {}
        for move in board.empty_cells():
            child = board.clone()
            child.set(move.row, move.col, mark)
            values[move] = self.minimax(child, mark != Mark.X)
        return values

    def clear_cache(self):
        """Forget remembered position values."""
        self._cache.clear()
