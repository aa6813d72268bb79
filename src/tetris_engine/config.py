"""Tunable parameters for the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Width of the I piece, the widest spawn shape.
MAX_PIECE_WIDTH = 4


@dataclass
class EngineConfig:
    """Board geometry, pacing and input settings for a game session.

    Times are in milliseconds.  ``tick_ms`` is the scheduler cadence while
    ``initial_gravity_ms`` is how much time must accumulate before the active
    piece is pulled down one row.
    """

    width: int = 10
    height: int = 20
    spawn_x: int = 3
    spawn_y: int = 0
    tick_ms: int = 60
    initial_gravity_ms: int = 600
    gravity_floor_ms: int = 120
    gravity_step_ms: int = 20
    swipe_threshold: float = 20
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board must be non-empty, got {self.width}x{self.height}")
        if not 0 <= self.spawn_x <= self.width - MAX_PIECE_WIDTH:
            raise ValueError(
                f"spawn_x must leave room for a {MAX_PIECE_WIDTH} wide piece on a {self.width} wide board"
            )
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        if self.gravity_floor_ms <= 0 or self.gravity_floor_ms > self.initial_gravity_ms:
            raise ValueError("gravity_floor_ms must be in (0, initial_gravity_ms]")
        if self.gravity_step_ms < 0:
            raise ValueError("gravity_step_ms must not be negative")
        if self.swipe_threshold < 0:
            raise ValueError("swipe_threshold must not be negative")


DEFAULT_CONFIG = EngineConfig()
