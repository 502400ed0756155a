"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in quake_explorer/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quake_explorer.core.config import Config, validate_config
from quake_explorer.core.explorer import parse_time_range


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An unset
    variable leaves the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion reads the environment).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object

    Raises:
        ValueError: If a value cannot be converted or the time range is unknown
    """
    data = {k: _resolve_value(v) for k, v in data.items()}
    defaults = Config()

    time_range = parse_time_range(
        str(data.get("default_time_range", defaults.default_time_range))
    )

    return Config(
        feed_base_url=str(data.get("feed_base_url", defaults.feed_base_url)),
        default_time_range=time_range.value,
        request_timeout_seconds=int(
            data.get("request_timeout_seconds", defaults.request_timeout_seconds)
        ),
        default_min_magnitude=float(
            data.get("default_min_magnitude", defaults.default_min_magnitude)
        ),
        map_width=int(data.get("map_width", defaults.map_width)),
        map_height=int(data.get("map_height", defaults.map_height)),
        tile_url=str(data.get("tile_url", defaults.tile_url)),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If a config value is invalid
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    result = validate_config(config)
    for error in result.critical_errors:
        logger.error("Config %s: %s", error.field, error.message)
    for warning in result.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)

    logger.info(
        "Loaded config: feed=%s, time_range=%s",
        config.feed_base_url,
        config.default_time_range,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        USGS_FEED_URL: Base URL of the summary feeds
        TIME_RANGE: Default time range (day, week, month)
        REQUEST_TIMEOUT: Feed request timeout in seconds
        MIN_MAGNITUDE: Initial minimum magnitude filter

    Returns:
        Config object from environment
    """
    data: dict[str, Any] = {}

    env_map = {
        "USGS_FEED_URL": "feed_base_url",
        "TIME_RANGE": "default_time_range",
        "REQUEST_TIMEOUT": "request_timeout_seconds",
        "MIN_MAGNITUDE": "default_min_magnitude",
    }
    for env_name, key in env_map.items():
        value = os.environ.get(env_name)
        if value:
            data[key] = value

    return load_config_from_dict(data)
