"""Tests for the Configuration Loader module.

Tests configuration loading from YAML files and environment variables.
"""

import logging
import os
from unittest.mock import patch

import pytest

from quake_explorer.core.config import Config, USGS_FEED_BASE
from quake_explorer.shell.config_loader import (
    _resolve_value,
    load_config,
    load_config_from_dict,
    load_config_from_env,
)


class TestResolveValue:
    """Tests for _resolve_value function."""

    def test_returns_non_string_unchanged(self):
        """Non-string values are returned unchanged."""
        assert _resolve_value(123) == 123
        assert _resolve_value(None) is None

    def test_returns_plain_string_unchanged(self):
        assert _resolve_value("https://example.com") == "https://example.com"

    def test_resolves_env_var_placeholder(self):
        """Resolves ${VAR} placeholders from environment."""
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert _resolve_value("${TEST_VAR}") == "test_value"

    def test_returns_placeholder_if_env_var_not_set(self):
        with patch.dict(os.environ, {}, clear=True):
            assert _resolve_value("${UNDEFINED_VAR}") == "${UNDEFINED_VAR}"


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict function."""

    def test_empty_dict_gives_defaults(self):
        assert load_config_from_dict({}) == Config()

    def test_parses_all_fields(self):
        config = load_config_from_dict({
            "feed_base_url": "https://example.com/summary",
            "default_time_range": "Week",
            "request_timeout_seconds": "10",
            "default_min_magnitude": 2.5,
            "map_width": 640,
            "map_height": 480,
            "tile_url": "https://tiles.example.com/{z}/{x}/{y}.png",
        })

        assert config.feed_base_url == "https://example.com/summary"
        assert config.default_time_range == "week"
        assert config.request_timeout_seconds == 10
        assert config.default_min_magnitude == 2.5
        assert (config.map_width, config.map_height) == (640, 480)
        assert config.tile_url.startswith("https://tiles.example.com")

    def test_resolves_placeholders(self):
        with patch.dict(os.environ, {"FEED": "https://mirror.example.com"}):
            config = load_config_from_dict({"feed_base_url": "${FEED}"})
        assert config.feed_base_url == "https://mirror.example.com"

    def test_invalid_time_range_raises(self):
        with pytest.raises(ValueError):
            load_config_from_dict({"default_time_range": "year"})

    def test_invalid_number_raises(self):
        with pytest.raises(ValueError):
            load_config_from_dict({"request_timeout_seconds": "soon"})


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file_returns_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "default_time_range: month\n"
            "default_min_magnitude: 4.5\n"
        )

        config = load_config(path)

        assert config.default_time_range == "month"
        assert config.default_min_magnitude == 4.5
        assert config.feed_base_url == USGS_FEED_BASE

    def test_uses_config_path_env(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("request_timeout_seconds: 7\n")

        with patch.dict(os.environ, {"CONFIG_PATH": str(path)}):
            config = load_config()

        assert config.request_timeout_seconds == 7

    def test_logs_validation_problems_by_severity(self, tmp_path, caplog):
        path = tmp_path / "config.yaml"
        path.write_text(
            "feed_base_url: ftp://example.com/summary\n"
            "request_timeout_seconds: 0\n"
        )

        with caplog.at_level(logging.WARNING, logger="quake_explorer.shell.config_loader"):
            load_config(path)

        levels = {r.getMessage(): r.levelno for r in caplog.records}
        assert levels[
            "Config request_timeout_seconds: Timeout must be positive, got 0"
        ] == logging.ERROR
        assert levels[
            "Config feed_base_url: Feed URL does not look like an HTTP URL"
        ] == logging.WARNING


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env function."""

    def test_no_env_gives_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            assert load_config_from_env() == Config()

    def test_reads_env(self):
        env = {
            "USGS_FEED_URL": "https://example.com/summary",
            "TIME_RANGE": "week",
            "REQUEST_TIMEOUT": "12",
            "MIN_MAGNITUDE": "3.5",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config_from_env()

        assert config.feed_base_url == "https://example.com/summary"
        assert config.default_time_range == "week"
        assert config.request_timeout_seconds == 12
        assert config.default_min_magnitude == 3.5
