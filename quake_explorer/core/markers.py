"""Map marker styling - Pure functions.

This module provides pure functions for deriving marker size, color and
popup text from event magnitude. The actual drawing is handled by the
shell layer or the browser.
"""

from dataclasses import dataclass
from typing import Iterable

from quake_explorer.core.earthquake import SeismicEvent


@dataclass(frozen=True)
class MarkerColors:
    """Stroke and fill colors for a circle marker."""
    color: str
    fill_color: str


@dataclass(frozen=True)
class Marker:
    """Immutable circle marker for one event.

    Attributes:
        event_id: ID of the event the marker represents
        latitude: Marker latitude
        longitude: Marker longitude
        radius: Radius in pixels
        colors: Stroke and fill colors
        popup: Popup text lines
        fill_opacity: Fill opacity (0-1)
        weight: Stroke width in pixels
    """
    event_id: str
    latitude: float
    longitude: float
    radius: float
    colors: MarkerColors
    popup: tuple[str, ...]
    fill_opacity: float = 0.7
    weight: int = 1


# Legend rows shown next to the map, in band order
MAGNITUDE_LEGEND: tuple[tuple[str, str], ...] = (
    ("Less than 2", "darkgreen"),
    ("2 - 3.9", "darkorange"),
    ("4 - 5.9", "darkred"),
    ("6+", "darkpurple"),
)

MIN_MARKER_RADIUS = 4


def get_marker_colors(magnitude: float) -> MarkerColors:
    """Get marker colors for a magnitude band.

    Pure function. Band edges at 2, 4 and 6 line up with the histogram's
    lower bounds.
    """
    if magnitude < 2:
        return MarkerColors(color="green", fill_color="darkgreen")
    elif magnitude < 4:
        return MarkerColors(color="orange", fill_color="darkorange")
    elif magnitude < 6:
        return MarkerColors(color="red", fill_color="darkred")
    return MarkerColors(color="purple", fill_color="darkpurple")


def get_marker_radius(magnitude: float) -> float:
    """Determine marker radius based on magnitude.

    Pure function. Twice the magnitude, never smaller than MIN_MARKER_RADIUS.
    """
    return max(magnitude * 2, MIN_MARKER_RADIUS)


def format_popup(event: SeismicEvent) -> tuple[str, ...]:
    """Format the popup lines for an event marker.

    Pure function.

    Args:
        event: Event to describe

    Returns:
        Popup lines: place, magnitude, depth and time
    """
    time_str = event.time.strftime("%Y-%m-%d %H:%M:%S UTC")
    return (
        event.place or "Unknown location",
        f"Magnitude: {event.magnitude}",
        f"Depth: {event.depth_km:.2f} km",
        f"Time: {time_str}",
    )


def create_marker(event: SeismicEvent) -> Marker:
    """Create the map marker for an event.

    Pure function.
    """
    return Marker(
        event_id=event.id,
        latitude=event.latitude,
        longitude=event.longitude,
        radius=get_marker_radius(event.magnitude),
        colors=get_marker_colors(event.magnitude),
        popup=format_popup(event),
    )


def create_markers(events: Iterable[SeismicEvent]) -> list[Marker]:
    """Create markers for events, preserving order."""
    return [create_marker(e) for e in events]
