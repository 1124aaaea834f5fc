# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
Color value type for the guessing game.

A Color is three sRGB channels, each a float in [0, 1]. Slider input
reaches 1.0 inclusive; randomly drawn targets never do.

Colors are frozen. A guess "changes" by replacing the whole Color with
a copy that differs in one channel (see Color.with_channel).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from numbers import Real
from typing import Union

import numpy as np
from numpy.typing import NDArray

from huematch.errors import InvalidChannelValue


class Channel(Enum):
    """One of the three color components."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    @classmethod
    def parse(cls, channel: Union[Channel, str]) -> Channel:
        """Accept a Channel or its name ("red", "Green", ...)."""
        if isinstance(channel, cls):
            return channel
        if isinstance(channel, str):
            try:
                return cls(channel.strip().lower())
            except ValueError:
                pass
        raise InvalidChannelValue(
            f"Unknown channel {channel!r}, expected one of red, green, blue"
        )


def _check_channel(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidChannelValue(f"{name} must be a real number, got {value!r}")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # Integers too large for a float
        raise InvalidChannelValue(f"{name} must be 0-1, got {value}") from None
    if not finite:
        raise InvalidChannelValue(f"{name} must be finite, got {value}")
    if not 0.0 <= value <= 1.0:
        raise InvalidChannelValue(f"{name} must be 0-1, got {value}")


@dataclass(frozen=True, slots=True)
class Color:
    """
    An sRGB color with channels in [0, 1].

    Attributes:
        red: Red channel (0.0 = none, 1.0 = full)
        green: Green channel
        blue: Blue channel
    """
    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        """Validate every channel is a finite number in [0, 1]."""
        _check_channel("red", self.red)
        _check_channel("green", self.green)
        _check_channel("blue", self.blue)

    def channel(self, channel: Union[Channel, str]) -> float:
        """Read a single channel."""
        return getattr(self, Channel.parse(channel).value)

    def with_channel(self, channel: Union[Channel, str], value: float) -> Color:
        """Return a copy with one channel replaced (validated like construction)."""
        return replace(self, **{Channel.parse(channel).value: value})

    def as_array(self) -> NDArray[np.float64]:
        """Channels as a float64 array of shape (3,), in r/g/b order."""
        return np.array([self.red, self.green, self.blue], dtype=np.float64)

    @classmethod
    def from_array(cls, values: NDArray[np.float64]) -> Color:
        """
        Build a Color from an array-like of three channel values.

        Raises:
            InvalidChannelValue: If the array does not hold exactly 3 values
                or any value is out of range
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise InvalidChannelValue(
                f"Expected 3 channel values, got shape {np.shape(values)}"
            )
        return cls(red=float(arr[0]), green=float(arr[1]), blue=float(arr[2]))

    def to_rgb255(self) -> tuple[int, int, int]:
        """
        Channels scaled to 0-255 and truncated.

        Truncation (not rounding) matches the numbers printed under the
        swatches, so 0.999 reads as 254.
        """
        return (int(self.red * 255), int(self.green * 255), int(self.blue * 255))

    @property
    def label(self) -> str:
        """Swatch caption, e.g. "R: 204 G: 76 B: 25"."""
        r, g, b = self.to_rgb255()
        return f"R: {r} G: {g} B: {b}"

    @property
    def hex(self) -> str:
        """
        Hex color string like "#CC4C19".

        Uses rounded 0-255 values, so it can differ by one from `label`.
        """
        r, g, b = (self.as_array() * 255).round().astype(int)
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"red": self.red, "green": self.green, "blue": self.blue}

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(red=data["red"], green=data["green"], blue=data["blue"])


# Initial guess for a new round: the middle of every slider
GRAY = Color(red=0.5, green=0.5, blue=0.5)
