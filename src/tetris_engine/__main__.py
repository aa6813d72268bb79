"""Simple ASCII demo for the Tetris engine.

Run with: `python -m tetris_engine`

This module plays a short headless session with the piece left to fall under
gravity and prints the final frame composed of the board plus the active
tetromino.  Useful as a minimal smoke test of the game loop.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from . import EngineConfig, GameSession, ManualTicker, PieceFactory, render_grid


def _format_grid(grid: list[list[int]]) -> str:
    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence.")
    parser.add_argument("--ticks", type=int, default=200, help="Number of scheduler ticks to run.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    config = EngineConfig(seed=args.seed)
    ticker = ManualTicker(config.tick_ms)
    session = GameSession(config, ticker=ticker, factory=PieceFactory(random.Random(args.seed), config))
    session.start()
    ticker.advance(args.ticks)
    print(_format_grid(render_grid(session.board, session.active)))
    print(f"Score: {session.score}")


if __name__ == "__main__":
    main()
