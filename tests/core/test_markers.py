"""Tests for map marker styling - Pure functions.

These are fast unit tests with no mocks needed since they test pure functions.
"""

import pytest

from quake_explorer.core.markers import (
    MAGNITUDE_LEGEND,
    MarkerColors,
    create_marker,
    create_markers,
    format_popup,
    get_marker_colors,
    get_marker_radius,
)


class TestGetMarkerColors:
    """Tests for get_marker_colors()."""

    def test_below_two_is_green(self):
        assert get_marker_colors(0.0) == MarkerColors("green", "darkgreen")
        assert get_marker_colors(1.99) == MarkerColors("green", "darkgreen")

    def test_two_to_four_is_orange(self):
        assert get_marker_colors(2.0) == MarkerColors("orange", "darkorange")
        assert get_marker_colors(3.99) == MarkerColors("orange", "darkorange")

    def test_four_to_six_is_red(self):
        assert get_marker_colors(4.0) == MarkerColors("red", "darkred")
        assert get_marker_colors(5.99) == MarkerColors("red", "darkred")

    def test_six_and_above_is_purple(self):
        assert get_marker_colors(6.0) == MarkerColors("purple", "darkpurple")
        assert get_marker_colors(8.2) == MarkerColors("purple", "darkpurple")

    def test_legend_matches_bands(self):
        """Legend fill colors follow the band order."""
        fills = [get_marker_colors(m).fill_color for m in (1.0, 3.0, 5.0, 7.0)]
        assert [color for _, color in MAGNITUDE_LEGEND] == fills


class TestGetMarkerRadius:
    """Tests for get_marker_radius()."""

    @pytest.mark.parametrize("magnitude,expected", [
        (0.0, 4),
        (1.5, 4),
        (2.0, 4),
        (3.2, 6.4),
        (6.5, 13.0),
    ])
    def test_twice_magnitude_with_minimum(self, magnitude, expected):
        assert get_marker_radius(magnitude) == pytest.approx(expected)


class TestFormatPopup:
    """Tests for format_popup()."""

    def test_popup_lines(self, make_event):
        lines = format_popup(make_event("a", 4.2, place="Tokyo, Japan"))

        assert lines[0] == "Tokyo, Japan"
        assert lines[1] == "Magnitude: 4.2"
        assert lines[2] == "Depth: 10.00 km"
        assert lines[3] == "Time: 2023-12-19 16:00:00 UTC"

    def test_missing_place(self, make_event):
        lines = format_popup(make_event("a", 1.0, place=None))
        assert lines[0] == "Unknown location"


class TestCreateMarker:
    """Tests for create_marker() and create_markers()."""

    def test_marker_fields(self, make_event):
        event = make_event("us1", 5.0, latitude=35.6, longitude=139.7)
        marker = create_marker(event)

        assert marker.event_id == "us1"
        assert (marker.latitude, marker.longitude) == (35.6, 139.7)
        assert marker.radius == 10.0
        assert marker.colors.color == "red"
        assert marker.fill_opacity == 0.7
        assert marker.weight == 1

    def test_preserves_order(self, scenario_events):
        markers = create_markers(scenario_events)
        assert [m.event_id for m in markers] == [e.id for e in scenario_events]
