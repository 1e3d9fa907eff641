"""
Fixed-tick clock and the main loop.

The loop alternates between drawing and waiting for input. While a countdown
runs, the wait is bounded by the time left until the next tick, so a key press
is handled at once and the tick still fires on schedule.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from wordrush.app import App
from wordrush.events import Key

logger = logging.getLogger(__name__)

Poll = Callable[[Optional[float]], Optional[Key]]
Render = Callable[[App], None]


class GameClock:
    def __init__(self, interval: float, now: Callable[[], float] = time.monotonic) -> None:
        if interval <= 0:
            raise ValueError("tick interval must be positive")
        self.interval = interval
        self._now = now
        self.last_tick = now()

    def elapsed(self) -> float:
        return self._now() - self.last_tick

    def timeout(self) -> float:
        return max(0.0, self.interval - self.elapsed())

    def due(self) -> bool:
        return self.elapsed() >= self.interval

    def reset(self) -> None:
        self.last_tick = self._now()

    def advance(self) -> None:
        """Schedule the next tick one interval after the last, dropping any backlog."""
        self.last_tick += self.interval
        if self.due():
            self.last_tick = self._now()


def run_loop(app: App, poll: Poll, render: Render, clock: GameClock) -> None:
    clock.reset()
    while app.running:
        render(app)
        counting = app.countdown_running
        key = poll(clock.timeout() if counting else None)
        if key is not None:
            app.handle_key(key)
        if not app.running:
            break
        # a countdown that was frozen or just started gets a full first tick
        if not (counting and app.countdown_running):
            clock.reset()
        elif clock.due():
            app.tick()
            clock.advance()
    logger.debug("main loop finished")
