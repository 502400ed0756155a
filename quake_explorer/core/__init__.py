"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Seismic event parsing
- Filtering by magnitude and location
- Magnitude histogram
- Map focus calculation
- Marker styling
- Explorer state transitions

All functions here are deterministic and have no I/O.
"""

from quake_explorer.core.earthquake import SeismicEvent, parse_events
from quake_explorer.core.filters import FilterCriteria, filter_events
from quake_explorer.core.histogram import HistogramBin, MAGNITUDE_BINS, build_histogram
from quake_explorer.core.focus import (
    DEFAULT_CENTER,
    DEFAULT_FOCUS,
    DEFAULT_ZOOM,
    MapFocus,
    compute_focus,
)
from quake_explorer.core.pipeline import FilterResult, compute_filter_result
from quake_explorer.core.markers import Marker, create_markers

__all__ = [
    # Events
    "SeismicEvent",
    "parse_events",
    # Filters
    "FilterCriteria",
    "filter_events",
    # Histogram
    "HistogramBin",
    "MAGNITUDE_BINS",
    "build_histogram",
    # Focus
    "DEFAULT_CENTER",
    "DEFAULT_FOCUS",
    "DEFAULT_ZOOM",
    "MapFocus",
    "compute_focus",
    # Pipeline
    "FilterResult",
    "compute_filter_result",
    # Markers
    "Marker",
    "create_markers",
]
