# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""Random target colors."""

from __future__ import annotations

from typing import Optional

import numpy as np

from huematch.schema import Color


class RandomColorGenerator:
    """
    Draws colors with three independent uniform channels in [0, 1).

    Entropy comes from a NumPy Generator. Pass a seed for a reproducible
    sequence, or inject a Generator directly to share one between
    components.

    Example:
        >>> gen = RandomColorGenerator(seed=42)
        >>> target = gen.generate()
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either seed or rng, not both")
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    @property
    def rng(self) -> np.random.Generator:
        """The underlying NumPy generator."""
        return self._rng

    def generate(self) -> Color:
        """Draw one color."""
        r, g, b = self._rng.random(3)
        return Color(red=float(r), green=float(g), blue=float(b))

    def generate_many(self, n: int) -> tuple[Color, ...]:
        """
        Draw n colors in one batch.

        Yields the same sequence as n consecutive generate() calls on an
        identically seeded generator.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        values = self._rng.random((n, 3))
        return tuple(
            Color(red=float(r), green=float(g), blue=float(b)) for r, g, b in values
        )
