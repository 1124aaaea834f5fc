# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""Exception types raised by HueMatch."""


class HueMatchError(Exception):
    """Base class for all HueMatch errors."""


class InvalidChannelValue(HueMatchError, ValueError):
    """A color channel was given a value outside [0, 1], or an unknown channel name."""


class InvalidStateError(HueMatchError, RuntimeError):
    """An operation was attempted in a session state that does not allow it."""
