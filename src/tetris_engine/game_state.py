"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import logging

from .board import Board
from .config import DEFAULT_CONFIG, EngineConfig
from .scoring import next_gravity_interval, score_for_lines
from .tetromino import Piece, PieceFactory, rotate_shape
from .utils import can_move, fits


LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Mutable state for a Tetris game session.

    Holds the board, the active piece, the score and the current gravity
    interval, and implements the piece controller: every move is validated
    with :func:`~tetris_engine.utils.fits` before it is committed.
    """

    config: EngineConfig = field(default_factory=EngineConfig)
    factory: Optional[PieceFactory] = None
    board: Board = field(init=False)
    active: Optional[Piece] = field(init=False, default=None)
    score: int = field(init=False, default=0)
    gravity_ms: int = field(init=False, default=DEFAULT_CONFIG.initial_gravity_ms)

    def __post_init__(self) -> None:
        if self.factory is None:
            self.factory = PieceFactory(config=self.config)
        self.board = Board(self.config.width, self.config.height)
        self.gravity_ms = self.config.initial_gravity_ms

    def spawn_piece(self) -> bool:
        """Replace the active piece with a new one from the factory.

        Returns ``False`` when the new piece does not fit at its spawn
        position, which ends the game.
        """

        self.active = self.factory.spawn()
        return fits(self.active.shape, self.active.x, self.active.y, self.board)

    def reset_game(self) -> None:
        """Reset the entire game state for a new game."""

        self.board = Board(self.config.width, self.config.height)
        self.score = 0
        self.gravity_ms = self.config.initial_gravity_ms
        self.active = None
        self.spawn_piece()

    def translate(self, dx: int, dy: int) -> bool:
        """Move the active piece by ``dx`` columns and ``dy`` rows if legal."""

        piece = self.active
        if piece is None:
            return False
        if not can_move(self.board, piece, dx, dy):
            return False
        piece.x += dx
        piece.y += dy
        return True

    def rotate(self) -> None:
        """Rotate the active piece clockwise in place.

        There are no wall kicks: a rotation that does not fit at the current
        position is discarded.
        """

        piece = self.active
        if piece is None:
            return
        rotated = rotate_shape(piece.shape)
        if fits(rotated, piece.x, piece.y, self.board):
            piece.shape = rotated

    def hard_drop(self) -> None:
        """Drop the active piece as far as it can fall."""

        while self.translate(0, 1):
            pass

    def lock_active(self) -> None:
        """Copy the active piece into the board and discard it."""

        if self.active is None:
            return
        self.board.lock_piece(self.active)
        self.active = None

    def clear_lines(self) -> int:
        """Clear full rows, award points and speed up gravity."""

        cleared = self.board.clear_lines()
        if cleared:
            self.score += score_for_lines(cleared)
            self.gravity_ms = next_gravity_interval(self.gravity_ms, cleared, self.config)
            LOGGER.info(
                "Cleared %d row(s). Score: %d, gravity: %dms",
                cleared,
                self.score,
                self.gravity_ms,
            )
        return cleared
