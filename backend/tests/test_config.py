"""Tests for environment-driven settings."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from upilens.core.config import ENV_PATH, Settings, get_settings
from upilens.core.exceptions import ConfigError, UpiLensError


class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.log_level == "INFO"
        assert settings.log_level_value == logging.INFO

    def test_case_insensitive_level(self):
        settings = Settings.from_env({"LOG_LEVEL": " debug "})
        assert settings.log_level == "DEBUG"
        assert settings.log_level_value == logging.DEBUG

    def test_blank_level_uses_default(self):
        assert Settings.from_env({"LOG_LEVEL": ""}).log_level == "INFO"

    def test_invalid_level_raises(self):
        with pytest.raises(ConfigError) as exc_info:
            Settings.from_env({"LOG_LEVEL": "verbose"})
        assert "VERBOSE" in exc_info.value.message
        assert "DEBUG" in exc_info.value.details["allowed"]

    def test_config_error_is_upilens_error(self):
        assert issubclass(ConfigError, UpiLensError)

    def test_reads_os_environ_by_default(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "warning"}):
            assert Settings.from_env().log_level == "WARNING"


class TestGetSettings:
    """Tests for cached settings loading."""

    def test_loads_dotenv_once(self):
        get_settings.cache_clear()
        try:
            with patch("upilens.core.config.load_dotenv") as mock_load, \
                 patch.dict("os.environ", {"LOG_LEVEL": "ERROR"}):
                first = get_settings()
                second = get_settings()
            mock_load.assert_called_once_with(ENV_PATH)
            assert first is second
            assert first.log_level == "ERROR"
        finally:
            get_settings.cache_clear()
