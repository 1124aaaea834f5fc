# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
Guess scoring.

Both colors are points in the unit RGB cube. The score is the Euclidean
distance between them, subtracted from 1 and scaled to 100:

    score = round_half_up((1 - distance) * 100)

A perfect match scores 100. The cube diagonal is sqrt(3), so the worst
possible guess scores -73. Scores are NOT clamped to [0, 100].
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from huematch.schema import Color


MAX_SCORE = 100
MAX_DISTANCE = math.sqrt(3.0)
MIN_SCORE = math.floor((1.0 - MAX_DISTANCE) * 100.0 + 0.5)  # -73


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    Equal to "add 0.5 and truncate" for non-negative values; for negative
    values it still rounds to nearest (-73.2 -> -73, -72.5 -> -72).
    """
    return math.floor(value + 0.5)


def color_distance(guess: Color, target: Color) -> float:
    """Euclidean distance between two colors in RGB space (0 to sqrt(3))."""
    delta = guess.as_array() - target.as_array()
    return float(np.sqrt(np.sum(delta ** 2)))


def compute_score(guess: Color, target: Color) -> int:
    """
    Score a guess against the target.

    Pure and symmetric: compute_score(a, b) == compute_score(b, a).

    Args:
        guess: The player's color
        target: The color to match

    Returns:
        Integer score, 100 for an exact match, down to -73
    """
    return round_half_up((1.0 - color_distance(guess, target)) * 100.0)


def compute_scores_batch(
    guesses: NDArray[np.float64],
    targets: NDArray[np.float64],
) -> NDArray[np.int64]:
    """
    Vectorized compute_score for arrays of colors.

    Args:
        guesses: Array of shape (N, 3) with r/g/b channels
        targets: Array of shape (N, 3)

    Returns:
        Array of shape (N,) with integer scores
    """
    guesses = np.asarray(guesses, dtype=np.float64)
    targets = np.asarray(targets, dtype=np.float64)
    if guesses.shape != targets.shape or guesses.shape[-1:] != (3,):
        raise ValueError(
            f"Expected matching (N, 3) arrays, got {guesses.shape} and {targets.shape}"
        )

    delta = guesses - targets
    distance = np.sqrt(np.sum(delta ** 2, axis=-1))
    return np.floor((1.0 - distance) * 100.0 + 0.5).astype(np.int64)
