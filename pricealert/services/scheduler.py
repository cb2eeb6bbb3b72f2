"""
Clock-aligned interval scheduler driving the price watcher.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Set

logger = logging.getLogger(__name__)


def next_boundary(now: float, interval_seconds: float) -> float:
    """
    Epoch time of the first multiple of the interval strictly after ``now``.

    With a 3600s interval this is the top of the next hour, the same trigger
    points as the cron expression ``0 * * * *``. A ``now`` exactly on a
    boundary gives the following one.
    """
    if interval_seconds <= 0:
        raise ValueError("interval_seconds must be positive.")
    return (now // interval_seconds + 1) * interval_seconds


def seconds_until_next_run(now: float, interval_seconds: float) -> float:
    """Seconds from ``now`` (epoch seconds) to the next interval boundary."""
    return next_boundary(now, interval_seconds) - now


class IntervalScheduler:
    """
    Fires ``callback`` on every interval boundary until stopped.

    Each run is dispatched as its own task and not awaited by the timer loop,
    so a slow run never delays the next trigger. Errors escaping a run are
    logged and do not stop the schedule.

    Args:
        callback: Zero-argument coroutine function to run on each trigger.
        interval_minutes (int): Interval between triggers.
        clock: Returns the current time in epoch seconds.
    """
    def __init__(self, callback: Callable[[], Awaitable], interval_minutes: int,
                 clock: Callable[[], float] = time.time):
        if interval_minutes <= 0:
            raise ValueError("interval_minutes must be positive.")
        self.callback = callback
        self.interval_seconds = interval_minutes * 60
        self.clock = clock
        self._running: Set[asyncio.Task] = set()
        self.runs_dispatched = 0

    async def run(self, stop_event: asyncio.Event):
        """Timer loop. Returns once ``stop_event`` is set."""
        logger.info(f"Scheduler started: every {self.interval_seconds // 60} minute(s), clock aligned.")
        next_run = self.following_boundary(self.clock())
        while not stop_event.is_set():
            delay = max(0.0, next_run - self.clock())
            logger.debug(f"Next scheduled check in {delay:.1f}s")
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=delay)
                break # Stop requested during the wait
            except asyncio.TimeoutError:
                pass
            self.dispatch()
            # An early wake or a slewed clock can read just before the boundary
            # that fired; never schedule that boundary again.
            next_run = self.following_boundary(max(self.clock(), next_run))
        logger.info("Scheduler stopped.")

    def following_boundary(self, now: float) -> float:
        """Epoch time of the first interval boundary strictly after ``now``."""
        return next_boundary(now, self.interval_seconds)

    def dispatch(self) -> asyncio.Task:
        """Starts one run of the callback as a background task."""
        self.runs_dispatched += 1
        task = asyncio.create_task(self._run_callback(), name=f"scheduled-check-{self.runs_dispatched}")
        self._running.add(task)
        task.add_done_callback(self._running.discard)
        return task

    async def _run_callback(self):
        try:
            await self.callback()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.exception(f"Scheduled check failed: {e}")

    async def wait_for_running(self):
        """Waits for dispatched runs that are still in flight."""
        if self._running:
            logger.info(f"Waiting for {len(self._running)} running check(s) to finish...")
            await asyncio.gather(*list(self._running), return_exceptions=True)
