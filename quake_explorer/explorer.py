"""Explorer - Wires Functional Core and Imperative Shell.

This module owns the single ExplorerState of the presentation layer. It
fetches feeds through the shell and moves the state forward with the pure
transitions from the core. It's the "glue" that makes the application work.
"""

import logging

import requests

from quake_explorer.core.config import Config
from quake_explorer.core.earthquake import parse_events
from quake_explorer.core.explorer import (
    ExplorerState,
    TimeRange,
    apply_criteria,
    fail_loading,
    finish_loading,
    initial_state,
    parse_time_range,
    reset_filters,
    start_loading,
)
from quake_explorer.core.filters import FilterCriteria
from quake_explorer.core.markers import create_markers
from quake_explorer.shell.static_map_client import MapImageResult, StaticMapClient
from quake_explorer.shell.usgs_client import USGSFeedClient


logger = logging.getLogger(__name__)


class Explorer:
    """Coordinates feed loading and filtering.

    This class wires together:
    - USGS feed client (fetches earthquake data)
    - Core functions (parsing, filtering, histogram, focus)
    - Static map client (renders the current view)

    Not thread-safe: callers serialize access to one Explorer.
    """

    def __init__(
        self,
        config: Config | None = None,
        feed_client: USGSFeedClient | None = None,
        static_map_client: StaticMapClient | None = None,
    ) -> None:
        """Initialize explorer with configuration.

        Args:
            config: Application configuration (defaults if not provided)
            feed_client: USGS feed client (created if not provided)
            static_map_client: Static map client (created if not provided)
        """
        self.config = config or Config()
        self.feed_client = feed_client or USGSFeedClient(
            base_url=self.config.feed_base_url,
            timeout=self.config.request_timeout_seconds,
        )
        self.static_map_client = static_map_client or StaticMapClient(
            tile_url=self.config.tile_url,
            width=self.config.map_width,
            height=self.config.map_height,
        )
        self.state: ExplorerState = initial_state(
            time_range=parse_time_range(self.config.default_time_range),
            criteria=FilterCriteria(min_magnitude=self.config.default_min_magnitude),
        )

    def load(self, time_range: TimeRange | str | None = None) -> ExplorerState:
        """Fetch a feed and re-apply the current filters.

        A failed fetch never raises; it moves the state to ERROR with a
        generic message and keeps any previously loaded events.

        Args:
            time_range: Feed window to load (current one if not provided)

        Returns:
            The new state

        Raises:
            ValueError: If the time range is unknown
        """
        new_range = parse_time_range(time_range) if time_range is not None else None
        self.state = start_loading(self.state, new_range)

        try:
            geojson = self.feed_client.fetch_feed(self.state.time_range)
        except (requests.RequestException, ValueError):
            logger.exception("Error fetching earthquake data")
            self.state = fail_loading(self.state)
            return self.state

        # Pure core function
        events = parse_events(geojson)
        self.state = finish_loading(self.state, events)

        logger.info(
            "Loaded %d earthquakes (%s), %d after filters",
            len(events),
            self.state.time_range.value,
            self.state.result.count,
        )

        return self.state

    def set_criteria(self, criteria: FilterCriteria) -> ExplorerState:
        """Apply new filter criteria to the loaded events."""
        self.state = apply_criteria(self.state, criteria)
        return self.state

    def set_min_magnitude(self, min_magnitude: float) -> ExplorerState:
        """Change the minimum magnitude, keeping the location query."""
        return self.set_criteria(FilterCriteria(
            min_magnitude=min_magnitude,
            location_query=self.state.criteria.location_query,
        ))

    def search_location(self, location_query: str) -> ExplorerState:
        """Change the location query, keeping the minimum magnitude."""
        state = self.set_criteria(FilterCriteria(
            min_magnitude=self.state.criteria.min_magnitude,
            location_query=location_query,
        ))

        if state.focus.diagnostic:
            logger.info("Location search matched nothing: %r", location_query)

        return state

    def reset_filters(self) -> ExplorerState:
        """Clear all filters and return to the world view."""
        self.state = reset_filters(self.state)
        return self.state

    def render_map(self) -> MapImageResult:
        """Render the current focus and filtered markers to a PNG."""
        markers = create_markers(self.state.result.filtered_events)
        return self.static_map_client.render(self.state.focus, markers)
