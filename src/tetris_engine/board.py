"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .tetromino import SHAPE_COLORS, Piece, TetrominoType


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

EMPTY = 0

Grid = NDArray[np.uint8]

# Mapping from ``TetrominoType`` to the colour token stored in the grid.  The
# specific numeric values are not important as long as ``0`` represents an empty
# cell.
PIECE_VALUES = {t: i + 1 for i, t in enumerate(TetrominoType)}
TOKEN_COLORS = {value: SHAPE_COLORS[t] for t, value in PIECE_VALUES.items()}


def create_empty_grid(height: int = HEIGHT, width: int = WIDTH) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Fixed-size grid holding the locked cells.

    Row ``0`` is the top of the playfield and row ``height - 1`` the floor.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board must be non-empty, got {width}x{height}")
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(height, width)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(row, col):
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(row, col):
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied.
        """

        if self.in_bounds(row, col):
            return bool(self.grid[row, col] == EMPTY)
        return False

    def color_at(self, row: int, col: int) -> Optional[str]:
        """Return the render colour of a locked cell or ``None`` if empty."""

        value = self.get_cell(row, col)
        return TOKEN_COLORS.get(value) if value != EMPTY else None

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != EMPTY))

    def remove_row(self, row: int) -> None:
        """Delete ``row`` and insert an empty row at the top.

        Every row above ``row`` shifts down by one; rows below are untouched.
        """

        if not 0 <= row < self.height:
            raise IndexError("Row out of bounds")
        remaining = np.delete(self.grid, row, axis=0)
        self.grid = np.vstack((create_empty_grid(1, self.width), remaining))

    def lock_piece(self, piece: Piece) -> None:
        """Copy the piece's colour token into the board grid.

        Cells above the visible board (negative rows) are dropped.

        Raises:
            IndexError: If a block lies left, right or below the board.
        """

        value = np.uint8(PIECE_VALUES[piece.type])
        for row, col in piece.cells():
            if row < 0:
                continue
            if not self.in_bounds(row, col):
                raise IndexError("Block out of bounds")
            self.grid[row, col] = value

    def clear_lines(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are scanned from the floor upwards.  After a removal the same
        row index is checked again since it now holds the row from above.
        """

        cleared = 0
        row = self.height - 1
        while row >= 0:
            if self.is_row_full(row):
                self.remove_row(row)
                cleared += 1
            else:
                row -= 1
        return cleared
