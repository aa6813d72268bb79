"""Game loop driving a :class:`GameState` from a periodic ticker.

The session owns all mutable game state and is the only entry point for
commands.  Rendering and game-over notifications are delegated to optional
callbacks so any front-end can be attached.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .board import Board
from .config import EngineConfig
from .game_state import GameState
from .input import Command, Point, classify_gesture
from .scheduler import ManualTicker, Ticker
from .tetromino import Piece, PieceFactory


LOGGER = logging.getLogger(__name__)

RenderCallback = Callable[[Board, Optional[Piece]], None]
GameOverCallback = Callable[[], None]


class GameSession:
    """Manage the game loop with start/pause/restart/stop controls."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        ticker: Optional[Ticker] = None,
        factory: Optional[PieceFactory] = None,
        on_render: Optional[RenderCallback] = None,
        on_game_over: Optional[GameOverCallback] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.ticker = ticker or ManualTicker(self.config.tick_ms)
        self.state = GameState(self.config, factory or PieceFactory(config=self.config))
        self.on_render = on_render
        self.on_game_over = on_game_over
        self.running = False
        self.paused = False
        self.drop_accum = 0.0
        self.game_overs = 0
        self._ticking = False
        self.state.reset_game()

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def active(self) -> Optional[Piece]:
        return self.state.active

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def gravity_ms(self) -> int:
        return self.state.gravity_ms

    # Internal helpers -------------------------------------------------
    def _render(self) -> None:
        if self.on_render is not None:
            self.on_render(self.state.board, self.state.active)

    def _reset(self) -> None:
        self.state.reset_game()
        self.paused = False
        self.drop_accum = 0.0

    def _game_over(self) -> None:
        """Notify listeners and start a fresh game in place."""

        LOGGER.info("Game over. Resetting.")
        self.game_overs += 1
        if self.on_game_over is not None:
            self.on_game_over()
        self._reset()
        self._render()

    def _on_tick(self, elapsed_ms: float) -> None:
        if self._ticking:
            LOGGER.debug("Dropping overlapping tick")
            return
        self._ticking = True
        try:
            self.tick(elapsed_ms)
        except Exception:
            LOGGER.exception("Crash detected during tick, resetting")
            self._reset()
        finally:
            self._ticking = False

    # Game loop ---------------------------------------------------------
    def tick(self, elapsed_ms: Optional[float] = None) -> None:
        """Advance the session clock by ``elapsed_ms``.

        Time accumulates until it reaches the current gravity interval, at
        which point one gravity step runs.  Ticks are ignored while stopped or
        paused.
        """

        if not self.running or self.paused:
            return
        if elapsed_ms is None:
            elapsed_ms = self.config.tick_ms
        self.drop_accum += elapsed_ms
        if self.drop_accum >= self.state.gravity_ms:
            self.drop_accum -= self.state.gravity_ms
            self.gravity_step()
        self._render()

    def gravity_step(self) -> None:
        """Pull the active piece down one row, locking it if it has landed."""

        if self.state.translate(0, 1):
            return
        self.lock_and_spawn()

    def lock_and_spawn(self) -> None:
        """Lock the active piece, clear rows and spawn the next piece.

        A new piece that does not fit at its spawn position ends the game and
        resets the session.
        """

        self.state.lock_active()
        self.state.clear_lines()
        self.spawn_next()

    def spawn_next(self) -> None:
        """Bring in a new active piece, ending the game if it cannot fit."""

        if not self.state.spawn_piece():
            self._game_over()

    # Lifecycle ---------------------------------------------------------
    def start(self) -> None:
        if self.running:
            LOGGER.info("Already running")
            return
        self.running = True
        self.paused = False
        self.drop_accum = 0.0
        self.ticker.start(self._on_tick)
        LOGGER.info("Game started")
        self._render()

    def toggle_pause(self) -> None:
        if not self.running:
            LOGGER.info("Pause ignored: not running")
            return
        self.paused = not self.paused
        LOGGER.info("Paused" if self.paused else "Resumed")
        self._render()

    def restart(self) -> None:
        """Stop the ticker, start a fresh game and run it."""

        self.ticker.stop()
        self._reset()
        self.running = True
        self.ticker.start(self._on_tick)
        LOGGER.info("Game restarted")
        self._render()

    def stop(self) -> None:
        if not self.running:
            LOGGER.info("Stop ignored: not running")
            return
        self.ticker.stop()
        self.running = False
        self.paused = False
        LOGGER.info("Game stopped")

    # Piece commands ----------------------------------------------------
    def _accepts_input(self) -> bool:
        if self.running and not self.paused and self.state.active is not None:
            return True
        LOGGER.debug("Command ignored: running=%s paused=%s", self.running, self.paused)
        return False

    def move_left(self) -> bool:
        return self._move(-1, 0)

    def move_right(self) -> bool:
        return self._move(1, 0)

    def move_down(self) -> bool:
        return self._move(0, 1)

    def _move(self, dx: int, dy: int) -> bool:
        if not self._accepts_input():
            return False
        moved = self.state.translate(dx, dy)
        self._render()
        return moved

    def rotate(self) -> None:
        if not self._accepts_input():
            return
        self.state.rotate()
        self._render()

    def hard_drop(self) -> None:
        if not self._accepts_input():
            return
        self.state.hard_drop()
        self._render()

    def dispatch(self, command: Command) -> None:
        """Run the handler for ``command``."""

        handlers = {
            Command.START: self.start,
            Command.TOGGLE_PAUSE: self.toggle_pause,
            Command.RESTART: self.restart,
            Command.MOVE_LEFT: self.move_left,
            Command.MOVE_RIGHT: self.move_right,
            Command.MOVE_DOWN: self.move_down,
            Command.ROTATE: self.rotate,
            Command.HARD_DROP: self.hard_drop,
        }
        command = Command(command)
        LOGGER.debug("Command %s", command.value)
        handlers[command]()

    def handle_gesture(self, start: Point, end: Point) -> Command:
        """Classify a swipe or tap and dispatch the resulting command."""

        command = classify_gesture(start, end, self.config.swipe_threshold)
        self.dispatch(command)
        return command
