# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
Time-based runtime pieces for HueMatch.

The periodic counter and the schedulers that drive it, plus the
subscription base shared with game sessions.
"""

from huematch.runtime.counter import PeriodicCounter, TickHandle
from huematch.runtime.observable import Observable
from huematch.runtime.scheduler import (
    ManualScheduler,
    ScheduledTask,
    Scheduler,
    ThreadScheduler,
)

__all__ = [
    "PeriodicCounter",
    "TickHandle",
    "Observable",
    "Scheduler",
    "ScheduledTask",
    "ThreadScheduler",
    "ManualScheduler",
]
