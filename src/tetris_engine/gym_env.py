"""Gymnasium-compatible wrapper around a :class:`GameSession`.

Observation is a flat vector suitable for SB3 MlpPolicy by default.
It includes:
  - board occupancy with the active piece overlaid (height x width)
  - active piece one-hot (7)

Action space is Discrete(6): the five piece commands followed by a no-op.
Every step applies the action and then one gravity step, so the piece keeps
falling even when the agent idles.  Reward is the score gained during the
step.  An episode terminates when the session hits a game over.
"""

from __future__ import annotations

from typing import Dict, Optional
import random

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import EngineConfig
from .input import PIECE_COMMANDS
from .session import GameSession
from .tetromino import PieceFactory, TetrominoType
from .utils import render_grid


NOOP_ACTION = len(PIECE_COMMANDS)


class TetrisCommandGymEnv(gym.Env):
    metadata = {
        "render_modes": ["ansi"],
        "render_fps": 60,
    }

    def __init__(
        self,
        *,
        config: Optional[EngineConfig] = None,
        max_steps: Optional[int] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or EngineConfig()
        self.render_mode = render_mode
        self.action_space = spaces.Discrete(NOOP_ACTION + 1)
        self._board_size = self.config.width * self.config.height
        self._obs_size = self._board_size + len(TetrominoType)
        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(self._obs_size,), dtype=np.float32
        )
        self._session: Optional[GameSession] = None
        self._steps = 0
        self._max_steps = max_steps

    @property
    def session(self) -> GameSession:
        if self._session is None:
            raise RuntimeError("Call reset() before using the environment")
        return self._session

    # ----------------------- Env API -----------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        factory = PieceFactory(random.Random(seed), self.config)
        self._session = GameSession(self.config, factory=factory)
        self._session.start()
        self._steps = 0
        return self._observe(), self._info()

    def step(self, action: int):
        session = self.session
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action!r}")
        score_before = session.score
        game_overs_before = session.game_overs
        if action != NOOP_ACTION:
            session.dispatch(PIECE_COMMANDS[action])
        session.gravity_step()
        self._steps += 1
        terminated = session.game_overs > game_overs_before
        # A game over resets the score, so the delta is only meaningful otherwise.
        reward = 0.0 if terminated else float(session.score - score_before)
        truncated = self._max_steps is not None and self._steps >= self._max_steps
        return self._observe(), reward, terminated, truncated, self._info()

    def render(self):
        grid = render_grid(self.session.board, self.session.active)
        return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)

    def close(self):
        if self._session is not None:
            self._session.stop()
        return None

    # -------------------- Helpers -------------------------
    def _observe(self) -> np.ndarray:
        session = self.session
        board = np.array(render_grid(session.board, session.active), dtype=np.float32)
        board = (board.reshape(-1) > 0).astype(np.float32)
        active_oh = np.zeros((len(TetrominoType),), dtype=np.float32)
        if session.active is not None:
            active_oh[list(TetrominoType).index(session.active.type)] = 1.0
        return np.concatenate([board, active_oh], dtype=np.float32)

    def _info(self) -> Dict:
        session = self.session
        return {
            "score": session.score,
            "gravity_ms": session.gravity_ms,
            "game_overs": session.game_overs,
        }
