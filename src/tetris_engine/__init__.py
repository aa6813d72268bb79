"""Falling-block puzzle engine with a tick driven game loop."""

from .config import EngineConfig
from .board import Board
from .tetromino import Piece, PieceFactory, TetrominoType, rotate_shape
from .game_state import GameState
from .input import Command, classify_gesture
from .scheduler import AsyncioTicker, ManualTicker, Ticker
from .scoring import next_gravity_interval, score_for_lines
from .session import GameSession
from .utils import can_move, fits, render_grid

__all__ = [
    "Board",
    "Command",
    "EngineConfig",
    "GameSession",
    "GameState",
    "Piece",
    "PieceFactory",
    "TetrominoType",
    "Ticker",
    "ManualTicker",
    "AsyncioTicker",
    "can_move",
    "classify_gesture",
    "fits",
    "next_gravity_interval",
    "render_grid",
    "rotate_shape",
    "score_for_lines",
]
