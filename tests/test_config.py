# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""Tests for GameConfig and environment overrides."""

import pytest

from huematch.config import ChannelPolicy, GameConfig


class TestGameConfig:

    def test_defaults(self):
        c = GameConfig()
        assert c.channel_policy is ChannelPolicy.CLAMP
        assert c.lock_after_reveal is True
        assert c.tick_interval == 1.0

    def test_frozen(self):
        with pytest.raises(AttributeError):
            GameConfig().tick_interval = 2.0

    @pytest.mark.parametrize("interval", [0, -1.0])
    def test_invalid_interval(self, interval):
        with pytest.raises(ValueError, match="tick_interval"):
            GameConfig(tick_interval=interval)

    def test_invalid_policy(self):
        with pytest.raises(ValueError, match="channel_policy"):
            GameConfig(channel_policy="clamp")


class TestFromEnv:

    def test_empty_env_gives_defaults(self):
        assert GameConfig.from_env({}) == GameConfig()

    def test_all_keys(self):
        c = GameConfig.from_env({
            "HUEMATCH_CHANNEL_POLICY": "Strict",
            "HUEMATCH_LOCK_AFTER_REVEAL": "off",
            "HUEMATCH_TICK_INTERVAL": "0.5",
        })
        assert c == GameConfig(
            channel_policy=ChannelPolicy.STRICT,
            lock_after_reveal=False,
            tick_interval=0.5,
        )

    @pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("0", False), ("FALSE", False)])
    def test_bool_spellings(self, raw, expected):
        assert GameConfig.from_env({"HUEMATCH_LOCK_AFTER_REVEAL": raw}).lock_after_reveal is expected

    def test_bad_policy(self):
        with pytest.raises(ValueError, match="HUEMATCH_CHANNEL_POLICY"):
            GameConfig.from_env({"HUEMATCH_CHANNEL_POLICY": "wrap"})

    def test_bad_bool(self):
        with pytest.raises(ValueError, match="HUEMATCH_LOCK_AFTER_REVEAL"):
            GameConfig.from_env({"HUEMATCH_LOCK_AFTER_REVEAL": "maybe"})

    def test_bad_interval(self):
        with pytest.raises(ValueError, match="HUEMATCH_TICK_INTERVAL"):
            GameConfig.from_env({"HUEMATCH_TICK_INTERVAL": "soon"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("HUEMATCH_TICK_INTERVAL", "2")
        assert GameConfig.from_env().tick_interval == 2.0
