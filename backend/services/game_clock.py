"""
Fixed-interval clock that drives the game.

Runs a schedule.Scheduler on a background thread and calls SnakeGame.tick
once per tick period (120 ms by default). The game object does its own
locking, so input handlers can keep calling into it while the clock runs.
"""

import logging
import threading
from typing import Optional

import schedule

logger = logging.getLogger(__name__)

# How often the loop checks for pending jobs, as a fraction of the tick period
LOOP_SLEEP_FRACTION = 0.1


class GameClock:
    """Calls game.tick() every interval_seconds on a daemon thread."""

    def __init__(self, game, interval_seconds: Optional[float] = None):
        self.game = game
        if interval_seconds is None:
            interval_seconds = game.config.tick_interval_seconds
        if interval_seconds <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_seconds}")
        self.interval_seconds = interval_seconds
        self.scheduler = schedule.Scheduler()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _tick(self):
        try:
            self.game.tick()
        except Exception:
            logger.exception("Tick failed")
            raise

    def run_pending(self):
        """Run the tick if it is due. Exposed so tests can drive the clock by hand."""
        self.scheduler.run_pending()

    def _loop(self):
        loop_sleep = self.interval_seconds * LOOP_SLEEP_FRACTION
        while not self._stop_event.is_set():
            try:
                self.run_pending()
            except Exception:
                logger.error("Stopping game clock after a failed tick")
                break
            self._stop_event.wait(loop_sleep)

    def start(self):
        if self.running:
            return
        self.scheduler.clear()
        self.scheduler.every(self.interval_seconds).seconds.do(self._tick)
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, name="game-clock", daemon=True)
        self._thread.start()
        logger.info(f"Game clock started ({self.interval_seconds * 1000:.0f} ms per tick)")

    def stop(self, timeout: float = 1.0):
        if not self.running:
            return
        self._stop_event.set()
        self._thread.join(timeout)
        self._thread = None
        self.scheduler.clear()
        logger.info("Game clock stopped")
