# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
Repeating-callback schedulers.

Two implementations share one small interface:

- ThreadScheduler: real time, backed by an APScheduler BackgroundScheduler
- ManualScheduler: simulated clock advanced explicitly (tests, headless shells)

Ticks are never coalesced. A callback that runs late is followed by the
ticks it missed, one call per elapsed interval, so the number of calls
always equals the number of elapsed intervals.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, Optional, Protocol

from apscheduler.job import Job
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler

logger = logging.getLogger(__name__)


def _check_interval(interval: float) -> None:
    if not interval > 0:
        raise ValueError(f"interval must be > 0, got {interval}")


class ScheduledTask(Protocol):
    """Handle to a repeating callback."""

    @property
    def cancelled(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback every `interval` seconds."""

    def schedule_repeating(
        self, interval: float, callback: Callable[[], None]
    ) -> ScheduledTask: ...


# =============================================================================
# Real time
# =============================================================================


class _JobTask:
    """A repeating callback registered as an APScheduler interval job."""

    def __init__(self, job: Job) -> None:
        self._job = job
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        try:
            self._job.remove()
        except JobLookupError:
            pass


class ThreadScheduler:
    """
    Runs repeating callbacks on an APScheduler BackgroundScheduler.

    The underlying scheduler starts with the first task and keeps running
    until shutdown(). Jobs are added with coalesce=False and no misfire
    grace limit, so a late wake-up still fires every missed interval.

    A callback that raises is logged and the job keeps its schedule; one
    failing tick never ends the series.

    Args:
        scheduler: Pre-configured BackgroundScheduler to share (optional)
    """

    def __init__(self, scheduler: Optional[BackgroundScheduler] = None) -> None:
        self._scheduler = (
            scheduler if scheduler is not None else BackgroundScheduler(daemon=True)
        )

    @property
    def running(self) -> bool:
        """True while the background thread is alive."""
        return self._scheduler.running

    def schedule_repeating(
        self, interval: float, callback: Callable[[], None]
    ) -> _JobTask:
        _check_interval(interval)
        if not self._scheduler.running:
            self._scheduler.start()

        def run() -> None:
            try:
                callback()
            except Exception:
                logger.exception("Tick callback failed")

        job = self._scheduler.add_job(
            run,
            "interval",
            seconds=interval,
            coalesce=False,
            misfire_grace_time=None,
            max_instances=1,
        )
        logger.debug("Scheduled job %s every %.3fs", job.id, interval)
        return _JobTask(job)

    def shutdown(self, wait: bool = True) -> None:
        """
        Stop the background thread. Idempotent.

        Args:
            wait: Block until running callbacks have finished
        """
        if self._scheduler.running:
            self._scheduler.shutdown(wait=wait)
            logger.debug("Scheduler shut down")


# =============================================================================
# Simulated time
# =============================================================================


class _ManualTask:
    """A repeating callback registered with a ManualScheduler."""

    def __init__(self, interval: float, callback: Callable[[], None], first_due: float) -> None:
        self.interval = interval
        self.callback = callback
        self.next_due = first_due
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class ManualScheduler:
    """
    Scheduler driven by a simulated clock.

    Nothing happens until advance() is called; then every task that falls
    due inside the advanced window fires, in deadline order, once per
    elapsed interval.

    A callback that raises stops advance() at that deadline and the error
    reaches the caller. The task stays scheduled, so the next advance()
    carries on ticking.

    Example:
        >>> sched = ManualScheduler()
        >>> counter = PeriodicCounter(scheduler=sched)
        >>> counter.start()
        >>> sched.advance(3)
        >>> counter.current_value()
        3
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)
        self._queue: list[tuple[float, int, _ManualTask]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        """Current simulated time in seconds."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of live (not cancelled) tasks."""
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    @property
    def queued(self) -> int:
        """Number of heap entries, cancelled ones included."""
        return len(self._queue)

    def schedule_repeating(
        self, interval: float, callback: Callable[[], None]
    ) -> _ManualTask:
        _check_interval(interval)
        self._purge_cancelled()
        task = _ManualTask(interval, callback, self._now + interval)
        heapq.heappush(self._queue, (task.next_due, next(self._seq), task))
        return task

    def advance(self, seconds: float) -> None:
        """
        Move the simulated clock forward, firing every due callback.

        Raises:
            ValueError: If seconds is negative
        """
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards ({seconds}s)")

        until = self._now + seconds
        # Small tolerance so 10 advances of 0.1s fire a 1s task
        while self._queue and self._queue[0][0] <= until + 1e-9:
            due, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            self._now = max(self._now, due)
            # Requeue first so a failing callback keeps its schedule
            task.next_due = due + task.interval
            heapq.heappush(self._queue, (task.next_due, next(self._seq), task))
            task.callback()
        self._now = max(self._now, until)

    def _purge_cancelled(self) -> None:
        live = [entry for entry in self._queue if not entry[2].cancelled]
        if len(live) != len(self._queue):
            heapq.heapify(live)
            self._queue = live
