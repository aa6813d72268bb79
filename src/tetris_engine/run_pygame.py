"""Simple pygame front-end for the Tetris engine.

This module is the outside world for :class:`~tetris_engine.session.GameSession`:
it draws whatever the render callback hands it, captures keyboard and mouse
input and forwards it as commands or swipe gestures.  The session itself runs
on an :class:`~tetris_engine.scheduler.AsyncioTicker`.

Install with the ``ui`` extra and run ``python -m tetris_engine.run_pygame``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import pygame

from .board import Board
from .config import EngineConfig
from .input import Command
from .scheduler import AsyncioTicker
from .session import GameSession
from .tetromino import Piece, SHAPE_COLORS

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to poll input at
FPS = 60

GRID_COLOR = (34, 34, 34)

KEY_COMMANDS = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_r: Command.RESTART,
    pygame.K_RETURN: Command.START,
}

LOGGER = logging.getLogger(__name__)


def draw_cell(screen: pygame.Surface, row: int, col: int, color: str) -> None:
    rect = pygame.Rect(col * CELL_SIZE + 1, row * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)
    pygame.draw.rect(screen, pygame.Color(color), rect)


def draw_frame(screen: pygame.Surface, board: Board, piece: Optional[Piece]) -> None:
    """Render the locked cells, the active piece and the grid lines."""

    screen.fill((0, 0, 0))
    for r in range(board.height):
        for c in range(board.width):
            color = board.color_at(r, c)
            if color is not None:
                draw_cell(screen, r, c, color)
    if piece is not None:
        color = SHAPE_COLORS[piece.type]
        for r, c in piece.cells():
            if board.in_bounds(r, c):
                draw_cell(screen, r, c, color)
    for c in range(board.width + 1):
        pygame.draw.line(screen, GRID_COLOR, (c * CELL_SIZE, 0), (c * CELL_SIZE, board.height * CELL_SIZE))
    for r in range(board.height + 1):
        pygame.draw.line(screen, GRID_COLOR, (0, r * CELL_SIZE), (board.width * CELL_SIZE, r * CELL_SIZE))


class PygameFrontend:
    """Own the window and feed pygame events into a game session."""

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self._screen: Optional[pygame.Surface] = None
        self._drag_start: Optional[tuple[int, int]] = None
        self.session = GameSession(
            self.config,
            ticker=AsyncioTicker(self.config.tick_ms),
            on_render=self._render,
            on_game_over=self._game_over,
        )

    def _render(self, board: Board, piece: Optional[Piece]) -> None:
        if self._screen is None:
            return
        draw_frame(self._screen, board, piece)
        paused = "Paused - " if self.session.paused else ""
        pygame.display.set_caption(f"Tetris - {paused}Score: {self.session.score}")
        pygame.display.flip()

    def _game_over(self) -> None:
        LOGGER.warning("Game over at score %d", self.session.score)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Process one event; return ``False`` when the window should close."""

        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key in KEY_COMMANDS:
            self.session.dispatch(KEY_COMMANDS[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._drag_start = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and self._drag_start is not None:
            self.session.handle_gesture(self._drag_start, event.pos)
            self._drag_start = None
        return True

    async def run(self) -> None:
        pygame.init()
        width = self.config.width * CELL_SIZE
        height = self.config.height * CELL_SIZE
        self._screen = pygame.display.set_mode((width, height))
        self.session.start()
        try:
            alive = True
            while alive:
                for event in pygame.event.get():
                    alive = self.handle_event(event) and alive
                # Yield to the event loop so the ticker task can run
                await asyncio.sleep(1 / FPS)
        finally:
            self.session.stop()
            pygame.quit()


def main() -> None:  # pragma: no cover - manual execution only
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    asyncio.run(PygameFrontend().run())


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
