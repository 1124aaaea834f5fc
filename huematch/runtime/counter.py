# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
Free-running tick counter.

Counts elapsed seconds (or any fixed interval) from the moment it is
started. It has no relation to game state; the UI shows it next to the
guess swatch.

Every start() begins again from 0. Values from a previous run are not
kept.
"""

from __future__ import annotations

import logging
import threading
from functools import partial
from typing import TYPE_CHECKING, Optional

from huematch.runtime.observable import Observable
from huematch.runtime.scheduler import Scheduler, ScheduledTask, ThreadScheduler

if TYPE_CHECKING:
    from huematch.config import GameConfig

logger = logging.getLogger(__name__)


class TickHandle:
    """Returned by PeriodicCounter.start(); identifies one run of the counter."""

    def __init__(self, counter: PeriodicCounter) -> None:
        self._counter = counter
        self._task: Optional[ScheduledTask] = None

    @property
    def active(self) -> bool:
        """True while this run is the counter's current run."""
        return self._counter._handle is self

    def stop(self) -> None:
        """Shorthand for counter.stop(handle)."""
        self._counter.stop(self)


class PeriodicCounter(Observable[int]):
    """
    Increments by exactly one every `interval` seconds while running.

    The count is guarded by a lock: ticks arrive on the scheduler's thread
    and readers on any other thread see the latest value. Subscribers are
    called with the new count after each tick, on the ticking thread.

    Args:
        interval: Seconds per tick (default: 1.0)
        scheduler: Source of ticks (default: a ThreadScheduler)
    """

    def __init__(
        self,
        interval: float = 1.0,
        *,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        super().__init__()
        if not interval > 0:
            raise ValueError(f"interval must be > 0, got {interval}")
        self._interval = float(interval)
        self._scheduler = scheduler if scheduler is not None else ThreadScheduler()
        self._lock = threading.Lock()
        self._count = 0
        self._handle: Optional[TickHandle] = None

    @classmethod
    def from_config(
        cls, config: GameConfig, scheduler: Optional[Scheduler] = None
    ) -> PeriodicCounter:
        """Build a counter ticking at config.tick_interval."""
        return cls(config.tick_interval, scheduler=scheduler)

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def count(self) -> int:
        return self.current_value()

    def current_value(self) -> int:
        """Number of ticks since the last start()."""
        with self._lock:
            return self._count

    def start(self) -> TickHandle:
        """
        Reset the count to 0 and begin ticking.

        Calling start() on a running counter returns the current handle
        without restarting.
        """
        with self._lock:
            if self._handle is not None:
                return self._handle
            handle = TickHandle(self)
            self._count = 0
            self._handle = handle

        handle._task = self._scheduler.schedule_repeating(
            self._interval, partial(self._tick, handle)
        )
        if not handle.active:
            # stop() ran before the task existed
            handle._task.cancel()
            return handle
        logger.info("Counter started (interval=%.3fs)", self._interval)
        return handle

    def stop(self, handle: Optional[TickHandle] = None) -> None:
        """
        Stop ticking. The count keeps its last value.

        Idempotent: stopping a stopped counter, or passing a handle from an
        earlier run, does nothing.
        """
        with self._lock:
            current = self._handle
            if current is None or (handle is not None and handle is not current):
                return
            self._handle = None
            value = self._count

        if current._task is not None:
            current._task.cancel()
        logger.info("Counter stopped at %d", value)

    def _tick(self, handle: TickHandle) -> None:
        with self._lock:
            # A tick already in flight when stop() ran must not count
            if self._handle is not handle:
                return
            self._count += 1
            value = self._count
        logger.debug("Tick %d", value)
        self._publish(value)

    def __enter__(self) -> PeriodicCounter:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
