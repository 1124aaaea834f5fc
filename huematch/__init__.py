# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
HueMatch -- game core for an RGB color-guessing exercise.

The player moves three sliders to match a random target color and gets a
score for how close the guess landed. A separate one-second counter ticks
alongside for display.

Quick start::

    from huematch import GameSession, RandomColorGenerator

    session = GameSession.start(RandomColorGenerator())
    session.set_channel("red", 0.8)
    session.reveal()   # e.g. 72
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from huematch.config import ChannelPolicy, GameConfig
from huematch.errors import HueMatchError, InvalidChannelValue, InvalidStateError
from huematch.game import (
    GameSession,
    RandomColorGenerator,
    SessionState,
    compute_score,
)
from huematch.runtime import ManualScheduler, PeriodicCounter, ThreadScheduler
from huematch.schema import GRAY, Channel, Color

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "GameSession",
    "SessionState",
    "RandomColorGenerator",
    "compute_score",
    "PeriodicCounter",
    # Types
    "Color",
    "Channel",
    "GRAY",
    # Scheduling
    "ThreadScheduler",
    "ManualScheduler",
    # Configuration
    "GameConfig",
    "ChannelPolicy",
    # Errors
    "HueMatchError",
    "InvalidChannelValue",
    "InvalidStateError",
    # Version
    "__version__",
]
