"""Seismic event data model and parsing - Pure functions.

This module handles parsing USGS GeoJSON feed data into typed SeismicEvent
objects. All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class SeismicEvent:
    """Immutable seismic event data model.

    Attributes:
        id: USGS event ID, unique within a fetch
        magnitude: Event magnitude
        place: Human-readable location description (None if not reported)
        time_millis: Event timestamp in milliseconds since epoch
        longitude: Epicenter longitude
        latitude: Epicenter latitude
        depth_km: Depth in kilometers
        url: USGS event detail URL (optional)
    """
    id: str
    magnitude: float
    place: str | None
    time_millis: int
    longitude: float
    latitude: float
    depth_km: float
    url: str | None = None

    @property
    def time(self) -> datetime:
        """Return the event time as a UTC datetime."""
        return datetime.fromtimestamp(self.time_millis / 1000, tz=timezone.utc)

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


def parse_event(feature: dict[str, Any]) -> SeismicEvent | None:
    """Parse a single GeoJSON feature into a SeismicEvent.

    Pure function: takes raw dict, returns typed SeismicEvent or None if the
    record is malformed.

    Args:
        feature: GeoJSON feature dict from a USGS feed

    Returns:
        SeismicEvent or None if parsing fails
    """
    try:
        props = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        coords = geometry.get("coordinates") or []

        # [longitude, latitude, depth]
        if len(coords) < 3:
            return None

        time_ms = props.get("time")
        if time_ms is None:
            return None

        magnitude = props.get("mag")
        if magnitude is None:
            return None

        return SeismicEvent(
            id=feature.get("id", ""),
            magnitude=float(magnitude),
            place=props.get("place"),
            time_millis=int(time_ms),
            longitude=float(coords[0]),
            latitude=float(coords[1]),
            depth_km=float(coords[2]),
            url=props.get("url"),
        )
    except (AttributeError, TypeError, ValueError):
        return None


def parse_events(geojson: dict[str, Any]) -> list[SeismicEvent]:
    """Parse a USGS GeoJSON FeatureCollection into SeismicEvents.

    Pure function: drops malformed features and keeps the feed's order.

    Args:
        geojson: Full GeoJSON FeatureCollection from a USGS feed

    Returns:
        List of valid SeismicEvent objects in feed order
    """
    features = geojson.get("features") or []
    events = []

    for feature in features:
        event = parse_event(feature)
        if event is not None:
            events.append(event)

    return events
