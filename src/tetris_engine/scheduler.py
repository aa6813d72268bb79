"""Periodic tick drivers for :class:`~tetris_engine.session.GameSession`.

A ticker calls ``callback(elapsed_ms)`` at a fixed cadence.  The session never
depends on wall-clock time directly, so tests drive it with
:class:`ManualTicker` while interactive front-ends use :class:`AsyncioTicker`.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

TickCallback = Callable[[float], None]


class Ticker:
    """Interface shared by all tick drivers."""

    def __init__(self, period_ms: float) -> None:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self.period_ms = period_ms
        self._callback: Optional[TickCallback] = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback

    def stop(self) -> None:
        self._callback = None


class ManualTicker(Ticker):
    """Ticker advanced explicitly by the caller."""

    def advance(self, count: int = 1) -> None:
        """Fire ``count`` ticks synchronously.

        Stops early if the callback stops this ticker.
        """

        for _ in range(count):
            callback = self._callback
            if callback is None:
                return
            callback(self.period_ms)


class AsyncioTicker(Ticker):
    """Ticker backed by an :mod:`asyncio` task.

    Ticks run one after another on the event loop so they can never overlap.
    ``start`` must be called while an event loop is running.
    """

    def __init__(self, period_ms: float) -> None:
        super().__init__(period_ms)
        self._task: Optional[asyncio.Task] = None

    async def _run(self, callback: TickCallback) -> None:
        delay = self.period_ms / 1000.0
        while True:
            await asyncio.sleep(delay)
            callback(self.period_ms)

    def start(self, callback: TickCallback) -> None:
        loop = asyncio.get_running_loop()
        self.stop()
        super().start(callback)
        self._task = loop.create_task(self._run(callback))

    def stop(self) -> None:
        super().stop()
        if self._task is not None:
            self._task.cancel()
            self._task = None
