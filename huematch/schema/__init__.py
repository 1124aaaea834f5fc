# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""
Value types for the guessing game.

Colors are immutable (frozen dataclasses). A target never changes once
drawn; a guess moves by being replaced.
"""

from huematch.schema.color import GRAY, Channel, Color

__all__ = [
    "Channel",
    "Color",
    "GRAY",
]
