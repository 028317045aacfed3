"""
Board model for the TicTacToe engine.
Holds the 3x3 grid of marks and is the only place moves are applied.
"""

from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Tuple

import numpy as np


BOARD_SIZE = 3

# Grid value of an empty cell
EMPTY = 0


class Mark(Enum):
    """The two marks in the game. X always moves first."""
    X = 1
    O = -1

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


class Move(NamedTuple):
    """A (row, col) pair addressing one cell."""
    row: int
    col: int


class IllegalMove(ValueError):
    """Raised when a mark is placed out of range or on an occupied cell."""

    def __init__(self, row: int, col: int, reason: str):
        super().__init__(f"Illegal move ({row}, {col}): {reason}")
        self.row = row
        self.col = col
        self.reason = reason


# Characters accepted by Board.from_rows
_SYMBOLS = {"X": Mark.X.value, "O": Mark.O.value, " ": EMPTY, ".": EMPTY, "_": EMPTY}


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are stored in a numpy int8 array: 1 for X, -1 for O, 0 for empty.
    Boards are value-like; anything exploring hypothetical moves must work
    on clone() and leave the original alone.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        if grid is None:
            grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self.grid = grid

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with all nine cells empty."""
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from three row strings, e.g. ["XXX", "OO ", "   "].

        Empty cells may be written as space, '.' or '_'.
        """
        rows = list(rows)
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells, got {rows!r}")

        try:
            values = [[_SYMBOLS[ch.upper()] for ch in r] for r in rows]
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol {e.args[0]!r}") from None

        return cls(np.array(values, dtype=np.int8))

    # ==================== ACCESSORS ====================

    def get(self, row: int, col: int) -> Optional[Mark]:
        """
        Get the mark in a cell.

        Returns:
            The Mark, or None if the cell is empty.
        """
        self._check_range(row, col)
        return self._to_mark(self.grid[row, col])

    def row(self, i: int) -> List[Optional[Mark]]:
        return [self._to_mark(v) for v in self.grid[i, :]]

    def column(self, i: int) -> List[Optional[Mark]]:
        return [self._to_mark(v) for v in self.grid[:, i]]

    def diagonals(self) -> Tuple[List[Optional[Mark]], List[Optional[Mark]]]:
        """Top-left to bottom-right, then top-right to bottom-left."""
        main = [self._to_mark(v) for v in np.diag(self.grid)]
        anti = [self._to_mark(v) for v in np.diag(np.fliplr(self.grid))]
        return main, anti

    def is_empty(self) -> bool:
        return not self.grid.any()

    def is_full(self) -> bool:
        return bool(np.all(self.grid != EMPTY))

    def empty_cells(self) -> List[Move]:
        """
        Get all empty cells in row-major order.

        The order is stable: search enumerates candidates in this order and
        breaks ties in favour of the earliest one.
        """
        rows, cols = np.nonzero(self.grid == EMPTY)
        return [Move(int(r), int(c)) for r, c in zip(rows, cols)]

    def count(self, mark: Mark) -> int:
        """Number of cells holding the given mark."""
        return int(np.count_nonzero(self.grid == mark.value))

    def cells(self) -> List[List[Optional[Mark]]]:
        """Read-only nested-list view of the nine cells, for display."""
        return [self.row(i) for i in range(BOARD_SIZE)]

    def key(self) -> bytes:
        """Hashable snapshot of the grid."""
        return self.grid.tobytes()

    # ==================== MUTATION ====================

    def set(self, row: int, col: int, mark: Mark):
        """
        Place a mark on an empty cell.

        This is the single mutation entry point for the board.

        Raises:
            IllegalMove: If (row, col) is out of range or already occupied.
        """
        self._check_range(row, col)

        current = self.grid[row, col]
        if current != EMPTY:
            raise IllegalMove(row, col, f"cell is already occupied by {Mark(int(current)).name}")

        self.grid[row, col] = mark.value

    def clone(self) -> "Board":
        """Independent copy of this board."""
        return Board(self.grid.copy())

    # ==================== HELPERS ====================

    @staticmethod
    def _check_range(row: int, col: int):
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IllegalMove(row, col, f"position must be 0-{BOARD_SIZE - 1}")

    @staticmethod
    def _to_mark(value) -> Optional[Mark]:
        return None if value == EMPTY else Mark(int(value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        rows = ["".join(cell.name if cell else "." for cell in r) for r in self.cells()]
        return f"Board({rows!r})"
