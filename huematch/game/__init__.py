# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
Game core: target generation, scoring and the round state machine.

All scoring is pure and deterministic. Randomness is confined to
RandomColorGenerator and can be seeded.
"""

from huematch.game.generator import RandomColorGenerator
from huematch.game.scoring import (
    MAX_DISTANCE,
    MAX_SCORE,
    MIN_SCORE,
    color_distance,
    compute_score,
    compute_scores_batch,
    round_half_up,
)
from huematch.game.session import PROMPT, GameSession, SessionState

__all__ = [
    "RandomColorGenerator",
    "compute_score",
    "compute_scores_batch",
    "color_distance",
    "round_half_up",
    "MAX_SCORE",
    "MIN_SCORE",
    "MAX_DISTANCE",
    "GameSession",
    "SessionState",
    "PROMPT",
]
