# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""Tests for the Color value type and Channel parsing."""

import math

import numpy as np
import pytest

from huematch.errors import InvalidChannelValue
from huematch.schema import GRAY, Channel, Color


class TestChannel:

    def test_parse_enum_passthrough(self):
        assert Channel.parse(Channel.BLUE) is Channel.BLUE

    def test_parse_name_case_insensitive(self):
        assert Channel.parse("Green") is Channel.GREEN
        assert Channel.parse(" red ") is Channel.RED

    def test_parse_unknown(self):
        with pytest.raises(InvalidChannelValue, match="purple"):
            Channel.parse("purple")

    def test_parse_non_string(self):
        with pytest.raises(InvalidChannelValue):
            Channel.parse(0)


class TestColor:

    def test_named_fields(self):
        c = Color(red=0.8, green=0.3, blue=0.1)
        assert (c.red, c.green, c.blue) == (0.8, 0.3, 0.1)

    def test_bounds_inclusive(self):
        Color(red=0.0, green=0.0, blue=0.0)
        Color(red=1.0, green=1.0, blue=1.0)

    def test_integer_channels_allowed(self):
        c = Color(red=1, green=0, blue=1)
        assert c.red == 1

    @pytest.mark.parametrize("bad", [-0.01, 1.01, math.nan, math.inf])
    def test_invalid_channel(self, bad):
        with pytest.raises(InvalidChannelValue):
            Color(red=bad, green=0.5, blue=0.5)

    def test_non_numeric_channel(self):
        with pytest.raises(InvalidChannelValue, match="real number"):
            Color(red="0.5", green=0.5, blue=0.5)

    def test_huge_integer_rejected(self):
        with pytest.raises(InvalidChannelValue, match="0-1"):
            Color(red=10**400, green=0.5, blue=0.5)

    def test_bool_rejected(self):
        with pytest.raises(InvalidChannelValue):
            Color(red=True, green=0.5, blue=0.5)

    def test_invalid_channel_is_value_error(self):
        with pytest.raises(ValueError):
            Color(red=2.0, green=0.5, blue=0.5)

    def test_frozen(self):
        c = Color(red=0.1, green=0.2, blue=0.3)
        with pytest.raises(AttributeError):
            c.red = 0.5

    def test_channel_read(self):
        c = Color(red=0.1, green=0.2, blue=0.3)
        assert c.channel("green") == 0.2
        assert c.channel(Channel.BLUE) == 0.3

    def test_with_channel_copies(self):
        c = Color(red=0.1, green=0.2, blue=0.3)
        d = c.with_channel(Channel.RED, 0.9)
        assert d == Color(red=0.9, green=0.2, blue=0.3)
        assert c.red == 0.1

    def test_with_channel_validates(self):
        with pytest.raises(InvalidChannelValue):
            GRAY.with_channel("red", 1.5)

    def test_as_array(self):
        arr = Color(red=0.1, green=0.2, blue=0.3).as_array()
        assert arr.dtype == np.float64
        np.testing.assert_allclose(arr, [0.1, 0.2, 0.3])

    def test_from_array(self):
        assert Color.from_array(np.array([0.25, 0.5, 0.75])) == Color(
            red=0.25, green=0.5, blue=0.75
        )

    def test_from_array_wrong_length(self):
        with pytest.raises(InvalidChannelValue, match="3 channel values"):
            Color.from_array([0.1, 0.2])


class TestColorDisplay:

    def test_rgb255_truncates(self):
        assert Color(red=0.999, green=1.0, blue=0.0).to_rgb255() == (254, 255, 0)

    def test_label(self):
        assert Color(red=0.8, green=0.3, blue=0.1).label == "R: 204 G: 76 B: 25"

    def test_hex(self):
        assert Color(red=1.0, green=0.0, blue=1.0).hex == "#FF00FF"
        assert Color(red=0.0, green=0.0, blue=0.0).hex == "#000000"

    def test_dict_roundtrip(self):
        c = Color(red=0.8, green=0.3, blue=0.1)
        assert c.to_dict() == {"red": 0.8, "green": 0.3, "blue": 0.1}
        assert Color.from_dict(c.to_dict()) == c

    def test_gray_default(self):
        assert GRAY == Color(red=0.5, green=0.5, blue=0.5)
