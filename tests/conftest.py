# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""Shared fixtures."""

import pytest

from huematch.game import GameSession, RandomColorGenerator
from huematch.runtime import ManualScheduler, PeriodicCounter
from huematch.schema import Color


@pytest.fixture()
def scheduler():
    return ManualScheduler()


@pytest.fixture()
def counter(scheduler):
    c = PeriodicCounter(scheduler=scheduler)
    yield c
    c.stop()


@pytest.fixture()
def generator():
    return RandomColorGenerator(seed=42)


@pytest.fixture()
def target():
    return Color(red=0.8, green=0.3, blue=0.1)


@pytest.fixture()
def session(target):
    return GameSession(target, Color(red=0.8, green=0.1, blue=0.3))
