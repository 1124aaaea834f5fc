# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
One round of the guessing game.

A session moves through two states:

    GUESSING  --reveal()-->  REVEALED

REVEALED is terminal. A new round is a new session (see reset() and
start()); sessions are never rewound.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from numbers import Real
from typing import TYPE_CHECKING, Optional, Union

from huematch.config import DEFAULT_CONFIG, ChannelPolicy, GameConfig
from huematch.errors import InvalidChannelValue, InvalidStateError
from huematch.game.scoring import compute_score
from huematch.runtime.observable import Observable
from huematch.schema import GRAY, Channel, Color

if TYPE_CHECKING:
    from huematch.game.generator import RandomColorGenerator

logger = logging.getLogger(__name__)

PROMPT = "Match this color"


class SessionState(Enum):
    """Where a session is in its round."""

    GUESSING = "guessing"
    REVEALED = "revealed"


class GameSession(Observable["GameSession"]):
    """
    Target, current guess and (once revealed) score for one round.

    Owned by a single thread; there is no internal locking. Subscribers
    are notified with the session after every guess change and on reveal.

    Args:
        target: Color to match; fixed for the life of the session
        guess: Initial guess (default: mid gray)
        config: Input and locking policy (default: GameConfig())

    Example:
        >>> session = GameSession(target=Color(red=0.8, green=0.3, blue=0.1))
        >>> session.set_channel("red", 0.8)
        >>> session.reveal()
        55
    """

    def __init__(
        self,
        target: Color,
        guess: Color = GRAY,
        *,
        config: Optional[GameConfig] = None,
    ) -> None:
        super().__init__()
        if not isinstance(target, Color) or not isinstance(guess, Color):
            raise TypeError("target and guess must be Color instances")
        self._target = target
        self._guess = guess
        self._config = config if config is not None else DEFAULT_CONFIG
        self._state = SessionState.GUESSING
        self._score: Optional[int] = None
        logger.debug("New session target=%s guess=%s", target.hex, guess.hex)

    @classmethod
    def start(
        cls,
        generator: RandomColorGenerator,
        guess: Color = GRAY,
        *,
        config: Optional[GameConfig] = None,
    ) -> GameSession:
        """Begin a round against a freshly drawn target."""
        return cls(generator.generate(), guess, config=config)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def target(self) -> Color:
        return self._target

    @property
    def guess(self) -> Color:
        return self._guess

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def revealed(self) -> bool:
        return self._state is SessionState.REVEALED

    @property
    def score(self) -> Optional[int]:
        """None until reveal(), then the fixed score."""
        return self._score

    @property
    def prompt(self) -> str:
        """Caption under the guess swatch: an instruction, then the guess values."""
        return self._guess.label if self.revealed else PROMPT

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def set_channel(self, channel: Union[Channel, str], value: float) -> None:
        """
        Move one guess channel, as a slider would.

        Out-of-range values are clamped into [0, 1] under
        ChannelPolicy.CLAMP and rejected under ChannelPolicy.STRICT.

        Raises:
            InvalidStateError: If the score was revealed and the config
                locks the guess after reveal
            InvalidChannelValue: For NaN, non-numbers, unknown channels, or
                out-of-range values under STRICT
        """
        channel = Channel.parse(channel)
        if self.revealed and self._config.lock_after_reveal:
            raise InvalidStateError(
                f"Cannot change {channel.value} after the score was revealed"
            )

        value = self._accept_value(channel, value)
        updated = self._guess.with_channel(channel, value)
        if updated == self._guess:
            return

        self._guess = updated
        logger.debug("Guess %s=%.4f", channel.value, value)
        self._publish(self)

    def set_red(self, value: float) -> None:
        self.set_channel(Channel.RED, value)

    def set_green(self, value: float) -> None:
        self.set_channel(Channel.GREEN, value)

    def set_blue(self, value: float) -> None:
        self.set_channel(Channel.BLUE, value)

    def reveal(self) -> int:
        """
        Score the guess and move to REVEALED.

        Calling it again returns the stored score; the score is computed
        once per session.
        """
        if self._score is not None:
            return self._score

        self._score = compute_score(self._guess, self._target)
        self._state = SessionState.REVEALED
        logger.info(
            "Revealed score=%d guess=%s target=%s",
            self._score,
            self._guess.hex,
            self._target.hex,
        )
        self._publish(self)
        return self._score

    def reset(self, new_target: Color, new_guess: Color = GRAY) -> GameSession:
        """Return a fresh session with the same config. This one is left as is."""
        return GameSession(new_target, new_guess, config=self._config)

    def to_dict(self) -> dict:
        """Snapshot of the session."""
        return {
            "target": self._target.to_dict(),
            "guess": self._guess.to_dict(),
            "state": self._state.value,
            "score": self._score,
        }

    def __repr__(self) -> str:
        return (
            f"GameSession(target={self._target.hex}, guess={self._guess.hex}, "
            f"state={self._state.value}, score={self._score})"
        )

    def _accept_value(self, channel: Channel, value: float) -> float:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidChannelValue(
                f"{channel.value} must be a real number, got {value!r}"
            )
        try:
            numeric = float(value)
        except OverflowError:
            # Integers too large for a float sit past either end of the slider
            numeric = math.inf if value > 0 else -math.inf
        if math.isnan(numeric):
            raise InvalidChannelValue(f"{channel.value} must not be NaN")
        if 0.0 <= numeric <= 1.0:
            return numeric

        if self._config.channel_policy is ChannelPolicy.STRICT:
            raise InvalidChannelValue(f"{channel.value} must be 0-1, got {value}")
        clamped = min(max(numeric, 0.0), 1.0)
        logger.warning("Clamped %s from %s to %s", channel.value, value, clamped)
        return clamped
