"""
Fixed-cadence tick driver for the game loop.

Wraps a private schedule.Scheduler holding at most one job: the tick.
The job exists only between start_ticking() and stop_ticking(), so the
owner decides exactly when ticks may fire.

Two ways to drive it:
 - call run_pending() from a host loop (e.g. the pygame frame loop)
 - call start() to poll from a background daemon thread until stop()

schedule measures the next run from the moment a job actually ran, so a
late poll would push every later tick back. run_pending() re-anchors the
job to its previous due time instead. Ticks still fire only when polled,
so each one may land up to one poll period late, but the lateness does
not accumulate.
"""

import datetime
import logging
import threading
import time
from typing import Callable, Optional

import schedule

from settings import TICK_INTERVAL_MS, SCHEDULER_LOOP_SLEEP_SECONDS


logger = logging.getLogger(__name__)


class TickDriver:
    """Calls on_tick every interval_ms while ticking is enabled."""

    def __init__(
        self,
        on_tick: Callable[[], None],
        interval_ms: int = TICK_INTERVAL_MS,
        on_pump: Optional[Callable[[], None]] = None,
        loop_sleep_seconds: float = SCHEDULER_LOOP_SLEEP_SECONDS
    ):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        self.on_tick = on_tick
        self.on_pump = on_pump
        self.interval_ms = interval_ms
        self.loop_sleep_seconds = loop_sleep_seconds

        self._scheduler = schedule.Scheduler()
        self._job: Optional[schedule.Job] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def ticking(self) -> bool:
        return self._job is not None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start_ticking(self) -> None:
        """Schedule the tick job; no-op if it is already scheduled."""
        if self._job is not None:
            return
        self._job = self._scheduler.every(self.interval_ms / 1000).seconds.do(self.on_tick)
        logger.debug("Tick job scheduled every %d ms", self.interval_ms)

    def stop_ticking(self) -> None:
        """Cancel the tick job; no-op if nothing is scheduled."""
        if self._job is None:
            return
        self._scheduler.cancel_job(self._job)
        self._job = None
        logger.debug("Tick job cancelled")

    def run_pending(self) -> None:
        """Pump queued work, then run the tick if it is due."""
        if self.on_pump is not None:
            self.on_pump()

        job = self._job
        due = job.next_run if job is not None else None
        self._scheduler.run_pending()

        # The tick may have cancelled its own job (game over)
        if job is not None and job is self._job and job.next_run != due:
            self._anchor(job, due)

    def _anchor(self, job: schedule.Job, due: datetime.datetime) -> None:
        period = datetime.timedelta(milliseconds=self.interval_ms)
        now = datetime.datetime.now()
        next_run = due + period
        # Skip the slots a stalled host loop missed rather than bursting through them
        while next_run <= now:
            next_run += period
        job.next_run = next_run

    def start(self) -> None:
        """Run the polling loop in a background daemon thread."""
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, name="tick-driver", daemon=True)
        self._thread.start()
        logger.info("Tick driver started (interval: %d ms)", self.interval_ms)

    def stop(self, timeout: float = 1.0) -> None:
        """Stop ticking and join the background thread, if any."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
            logger.info("Tick driver stopped")
        self.stop_ticking()

    def _loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.run_pending()
            except Exception:
                # A failed tick is retried on the next poll
                logger.exception("Tick driver iteration failed")
            time.sleep(self.loop_sleep_seconds)
