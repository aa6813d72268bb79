"""Utility helpers for the Tetris engine."""

from __future__ import annotations

from typing import Optional, List

import numpy as np

from .board import Board, PIECE_VALUES
from .tetromino import Piece, Shape


def fits(shape: Shape, origin_x: int, origin_y: int, board: Board) -> bool:
    """Return ``True`` if ``shape`` placed at ``(origin_x, origin_y)`` is legal.

    Every occupied cell must lie within the board's columns and above its
    floor.  Cells above the top row are allowed, so a freshly spawned or
    rotated piece may poke out of the board, but any cell inside the board must
    land on an empty square.  This is the single check used to validate
    movement, rotation and spawning.
    """

    rows, cols = np.nonzero(shape)
    for dr, dc in zip(rows, cols):
        new_row = origin_y + int(dr)
        new_col = origin_x + int(dc)
        if not 0 <= new_col < board.width or new_row >= board.height:
            return False
        if new_row >= 0 and not board.is_empty(new_row, new_col):
            return False
    return True


def can_move(board: Board, piece: Piece, dx: int, dy: int) -> bool:
    """Return ``True`` if ``piece`` can move by ``dx`` and ``dy`` on ``board``."""

    return fits(piece.shape, piece.x + dx, piece.y + dy, board)


def render_grid(board: Board, active: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece). Cells occupied by the active piece receive the colour token for the
    piece's type.
    """

    grid = board.grid.tolist()
    if active is not None:
        for r, c in active.cells():
            if board.in_bounds(r, c):
                grid[r][c] = PIECE_VALUES[active.type]
    return grid
