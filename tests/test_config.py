"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest

from config import AppConfig, DisplayConfig, GameConfig, LogConfig


class TestDisplayConfig:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            display = DisplayConfig()

        assert display.pause_seconds == 1.5
        assert display.long_pause_seconds == 2.5
        assert display.clear_screen is True

    def test_env_overrides(self):
        env = {"TWENTYONE_PAUSE": "0", "TWENTYONE_LONG_PAUSE": "0.5", "TWENTYONE_CLEAR": "false"}
        with patch.dict(os.environ, env, clear=True):
            display = DisplayConfig()

        assert display.pause_seconds == 0
        assert display.long_pause_seconds == 0.5
        assert display.clear_screen is False

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DisplayConfig().pause_seconds = 3


class TestLogConfig:
    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            assert LogConfig().level == "WARNING"

    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert LogConfig().level == "DEBUG"


class TestGameConfig:
    def test_fixed_rules(self):
        game = GameConfig()
        assert game.dealer_threshold == 17
        assert "R2D2" in game.dealer_names


class TestAppConfig:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            app = AppConfig()

        assert app.debug is False
        assert app.seed is None
        assert isinstance(app.display, DisplayConfig)

    def test_seed_and_debug(self):
        with patch.dict(os.environ, {"TWENTYONE_SEED": "42", "DEBUG": "true"}, clear=True):
            app = AppConfig()

        assert app.seed == 42
        assert app.debug is True
