"""Tetromino catalogue, rotation and the piece factory.

Every piece type carries a canonical occupancy matrix in its spawn
orientation.  The matrices are read-only ``numpy`` arrays so that the catalogue
cannot be corrupted by a falling piece; pieces always work on their own copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple
import random

import numpy as np
from numpy.typing import NDArray

from .config import DEFAULT_CONFIG, EngineConfig

Shape = NDArray[np.uint8]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


def _template(rows: List[List[int]]) -> Shape:
    shape = np.array(rows, dtype=np.uint8)
    shape.setflags(write=False)
    return shape


# Spawn orientation for each tetromino, top-left aligned in its bounding box.
SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _template([[1, 1, 1, 1]]),
    TetrominoType.O: _template([[1, 1], [1, 1]]),
    TetrominoType.T: _template([[1, 1, 1], [0, 1, 0]]),
    TetrominoType.S: _template([[0, 1, 1], [1, 1, 0]]),
    TetrominoType.Z: _template([[1, 1, 0], [0, 1, 1]]),
    TetrominoType.J: _template([[1, 0, 0], [1, 1, 1]]),
    TetrominoType.L: _template([[0, 0, 1], [1, 1, 1]]),
}

SHAPE_COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#00f0f0",
    TetrominoType.O: "#f0f000",
    TetrominoType.T: "#a000f0",
    TetrominoType.S: "#00f000",
    TetrominoType.Z: "#f00000",
    TetrominoType.J: "#0000f0",
    TetrominoType.L: "#f0a000",
}


def rotate_shape(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    Row ``c`` of the result is column ``c`` of ``shape`` read from the bottom
    row upwards, so a ``(rows, cols)`` matrix becomes ``(cols, rows)``.  The
    input is never modified and the result never shares memory with it.
    """

    return np.flipud(shape).T.copy()


@dataclass(eq=False)
class Piece:
    """Active falling piece.

    ``x`` is the column and ``y`` the row of the shape's bounding box top-left
    corner on the board.  ``y`` may be negative while the piece pokes out
    above the visible grid.
    """

    type: TetrominoType
    shape: Shape
    x: int = 0
    y: int = 0

    def cells(self) -> List[Tuple[int, int]]:
        """Return the ``(row, col)`` board coordinates occupied by the piece."""

        rows, cols = np.nonzero(self.shape)
        return [(self.y + int(r), self.x + int(c)) for r, c in zip(rows, cols)]


class PieceFactory:
    """Create new pieces with a uniformly random type.

    ``rng`` can be any object exposing ``choice`` (usually
    :class:`random.Random`), which keeps piece sequences reproducible in tests.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.spawn_x = config.spawn_x
        self.spawn_y = config.spawn_y

    def create(self, piece_type: TetrominoType) -> Piece:
        """Return a fresh piece of ``piece_type`` at the spawn position."""

        piece_type = TetrominoType(piece_type)
        return Piece(piece_type, SHAPES[piece_type].copy(), self.spawn_x, self.spawn_y)

    def spawn(self) -> Piece:
        """Return a new piece of a randomly chosen type."""

        return self.create(self.rng.choice(list(TetrominoType)))
