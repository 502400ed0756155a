"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS feed client (HTTP)
- Static map rendering (map tiles)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from quake_explorer.shell.usgs_client import USGSFeedClient
from quake_explorer.shell.static_map_client import StaticMapClient
from quake_explorer.shell.config_loader import load_config, Config

__all__ = [
    "USGSFeedClient",
    "StaticMapClient",
    "load_config",
    "Config",
]
