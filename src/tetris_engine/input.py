"""Commands accepted by a game session and the swipe gesture classifier."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

Point = Tuple[float, float]

# Gestures shorter than this on both axes count as a tap.
SWIPE_THRESHOLD = 20


class Command(str, Enum):
    """Zero-argument triggers understood by :class:`GameSession`."""

    START = "start"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"


# Commands that act on the falling piece rather than the session lifecycle.
PIECE_COMMANDS = (
    Command.MOVE_LEFT,
    Command.MOVE_RIGHT,
    Command.MOVE_DOWN,
    Command.ROTATE,
    Command.HARD_DROP,
)


def classify_gesture(start: Point, end: Point, threshold: float = SWIPE_THRESHOLD) -> Command:
    """Map a completed touch gesture to a single command.

    A tap rotates.  Otherwise the dominant axis decides: horizontal swipes move
    sideways, a downward swipe soft drops and an upward swipe hard drops.
    Diagonal swipes with equal extent on both axes count as vertical.
    """

    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if abs(dx) < threshold and abs(dy) < threshold:
        return Command.ROTATE
    if abs(dx) > abs(dy):
        return Command.MOVE_RIGHT if dx > 0 else Command.MOVE_LEFT
    return Command.MOVE_DOWN if dy > 0 else Command.HARD_DROP
