# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
Game configuration.

Defaults match the reference game: slider input is clamped, the guess is
frozen once the score is revealed, and the counter ticks once per second.
Every setting can be overridden from the environment:

    HUEMATCH_CHANNEL_POLICY      clamp | strict
    HUEMATCH_LOCK_AFTER_REVEAL   1/0, true/false, yes/no, on/off
    HUEMATCH_TICK_INTERVAL       seconds (float, > 0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class ChannelPolicy(Enum):
    """What a session does with a channel value outside [0, 1]."""

    CLAMP = "clamp"
    STRICT = "strict"


_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class GameConfig:
    """Configuration for game sessions and the periodic counter."""

    # Out-of-range slider values: clamp into [0, 1] or raise
    channel_policy: ChannelPolicy = ChannelPolicy.CLAMP

    # Reject guess changes once the score has been revealed
    lock_after_reveal: bool = True

    # Seconds between counter ticks
    tick_interval: float = 1.0

    def __post_init__(self) -> None:
        """Validate settings."""
        if not isinstance(self.channel_policy, ChannelPolicy):
            raise ValueError(
                f"channel_policy must be a ChannelPolicy, got {self.channel_policy!r}"
            )
        if not self.tick_interval > 0:
            raise ValueError(f"tick_interval must be > 0, got {self.tick_interval}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> GameConfig:
        """
        Build a config from HUEMATCH_* environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            GameConfig with defaults for every key that is not set

        Raises:
            ValueError: If a variable is set to an unparseable value
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        raw = env.get("HUEMATCH_CHANNEL_POLICY")
        if raw is not None:
            try:
                kwargs["channel_policy"] = ChannelPolicy(raw.strip().lower())
            except ValueError:
                choices = ", ".join(p.value for p in ChannelPolicy)
                raise ValueError(
                    f"HUEMATCH_CHANNEL_POLICY must be one of {choices}, got {raw!r}"
                ) from None

        raw = env.get("HUEMATCH_LOCK_AFTER_REVEAL")
        if raw is not None:
            kwargs["lock_after_reveal"] = _parse_bool("HUEMATCH_LOCK_AFTER_REVEAL", raw)

        raw = env.get("HUEMATCH_TICK_INTERVAL")
        if raw is not None:
            try:
                kwargs["tick_interval"] = float(raw)
            except ValueError:
                raise ValueError(
                    f"HUEMATCH_TICK_INTERVAL must be a number, got {raw!r}"
                ) from None

        return cls(**kwargs)


DEFAULT_CONFIG = GameConfig()
