"""Map focus calculation - Pure functions.

This module decides where the map should be centered and how far it should
be zoomed after each filter change. All functions are pure with no side
effects.
"""

from dataclasses import dataclass
from typing import Sequence

from quake_explorer.core.earthquake import SeismicEvent
from quake_explorer.core.filters import FilterCriteria, has_location_query


# World view shown when no location search is active
DEFAULT_CENTER: tuple[float, float] = (20.0, 0.0)
DEFAULT_ZOOM = 2

# Zoom level used when a location search has matches
SEARCH_ZOOM = 5


@dataclass(frozen=True)
class MapFocus:
    """Immutable map view directive.

    Attributes:
        center: (latitude, longitude) of the map center
        zoom_level: Map zoom level
        diagnostic: Message shown when a location search matched nothing
    """
    center: tuple[float, float]
    zoom_level: int
    diagnostic: str | None = None


DEFAULT_FOCUS = MapFocus(center=DEFAULT_CENTER, zoom_level=DEFAULT_ZOOM)


def format_no_results_message(location_query: str) -> str:
    """Build the diagnostic for a location search with no matches."""
    return (
        f"No events found near '{location_query}'. "
        "Try a different location or broaden your search."
    )


def compute_focus(
    criteria: FilterCriteria,
    filtered_events: Sequence[SeismicEvent],
    previous_focus: MapFocus = DEFAULT_FOCUS,
) -> MapFocus:
    """Compute the next map focus.

    Pure function.

    - No location query: reset to the default world view.
    - Query with matches: center on the first match at SEARCH_ZOOM.
    - Query without matches: keep the previous center and zoom and attach
      a diagnostic.

    Args:
        criteria: Current filter criteria
        filtered_events: Output of filter_events for the same criteria
        previous_focus: Focus in effect before this change

    Returns:
        The MapFocus to apply
    """
    if not has_location_query(criteria):
        return DEFAULT_FOCUS

    if filtered_events:
        first = filtered_events[0]
        return MapFocus(center=first.coordinates, zoom_level=SEARCH_ZOOM)

    return MapFocus(
        center=previous_focus.center,
        zoom_level=previous_focus.zoom_level,
        diagnostic=format_no_results_message(criteria.location_query),
    )
