"""USGS Feed Client - Imperative Shell.

This module handles HTTP communication with the USGS GeoJSON summary feeds.
All I/O is contained here; business logic is in the core module.
"""

import logging
from typing import Any

import requests

from quake_explorer.core.config import USGS_FEED_BASE
from quake_explorer.core.explorer import TimeRange, parse_time_range


logger = logging.getLogger(__name__)


# Default timeout for feed requests (seconds)
DEFAULT_TIMEOUT = 30


def build_feed_url(base_url: str, time_range: TimeRange) -> str:
    """Build the summary feed URL for a time range.

    Pure helper, e.g. .../summary/all_week.geojson
    """
    return f"{base_url.rstrip('/')}/all_{time_range.value}.geojson"


class USGSFeedClient:
    """Client for fetching earthquake feeds from USGS.

    This is part of the imperative shell - it handles HTTP I/O. Each call
    makes a single attempt; there is no retry or caching.
    """

    def __init__(
        self,
        base_url: str = USGS_FEED_BASE,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize USGS feed client.

        Args:
            base_url: Base URL of the summary feeds
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout

    def fetch_feed(self, time_range: TimeRange | str = TimeRange.DAY) -> dict[str, Any]:
        """Fetch the GeoJSON feed for a time range.

        This method performs HTTP I/O.

        Args:
            time_range: day, week or month

        Returns:
            Raw GeoJSON FeatureCollection

        Raises:
            ValueError: If the time range is unknown or the body is not a
                GeoJSON object
            requests.RequestException: If the request fails or returns a
                non-success status
        """
        url = build_feed_url(self.base_url, parse_time_range(time_range))

        logger.info(
            "Fetching earthquake feed from USGS",
            extra={"url": url},
        )

        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError("USGS feed did not return a GeoJSON object")

        count = len(data.get("features") or [])

        logger.info(
            "Fetched %d earthquakes from USGS",
            count,
        )

        return data
