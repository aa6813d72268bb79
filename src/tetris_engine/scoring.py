"""Line clear scoring and gravity pacing."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, EngineConfig

# Points awarded for clearing 1, 2, 3 or 4 rows in a single pass.
LINE_CLEAR_SCORES = (100, 300, 500, 800)


def score_for_lines(lines: int) -> int:
    """Return the points for clearing ``lines`` rows at once.

    Zero rows, or more rows than the table covers, are worth nothing.
    """

    if 1 <= lines <= len(LINE_CLEAR_SCORES):
        return LINE_CLEAR_SCORES[lines - 1]
    return 0


def next_gravity_interval(
    interval_ms: int, lines: int, config: EngineConfig = DEFAULT_CONFIG
) -> int:
    """Return the gravity interval after clearing ``lines`` rows.

    Each cleared row shortens the interval by ``config.gravity_step_ms`` but
    the result never drops under ``config.gravity_floor_ms``.  Intervals that
    are already at or below the floor are left alone.
    """

    if lines <= 0 or interval_ms <= config.gravity_floor_ms:
        return interval_ms
    return max(config.gravity_floor_ms, interval_ms - config.gravity_step_ms * lines)
