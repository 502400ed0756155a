"""Shared fixtures for core tests."""

import pytest

from quake_explorer.core.earthquake import SeismicEvent


def _make_event(
    id: str,
    magnitude: float,
    place: str | None = "Somewhere",
    latitude: float = 0.0,
    longitude: float = 0.0,
) -> SeismicEvent:
    return SeismicEvent(
        id=id,
        magnitude=magnitude,
        place=place,
        time_millis=1703001600000,
        longitude=longitude,
        latitude=latitude,
        depth_km=10.0,
    )


@pytest.fixture
def make_event():
    """Factory for SeismicEvents with sensible defaults."""
    return _make_event


@pytest.fixture
def scenario_events():
    """Four events spanning every histogram bin."""
    return [
        _make_event("m15", 1.5, place="5km N of Anza, CA", latitude=33.6, longitude=-116.7),
        _make_event("m32", 3.2, place="Tokyo, Japan", latitude=35.6, longitude=139.7),
        _make_event("m40", 4.0, place=None, latitude=-20.1, longitude=-70.3),
        _make_event("m65", 6.5, place="South of the Fiji Islands", latitude=-23.5, longitude=179.2),
    ]
