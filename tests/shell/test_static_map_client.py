"""Tests for static map client.

Uses mocked tile fetching to avoid network calls in tests.
"""

from unittest.mock import MagicMock, patch

from quake_explorer.core.focus import MapFocus
from quake_explorer.core.markers import Marker, MarkerColors
from quake_explorer.shell.static_map_client import StaticMapClient


TEST_FOCUS = MapFocus(center=(35.6, 139.7), zoom_level=5)

TEST_MARKER = Marker(
    event_id="us1",
    latitude=35.6,
    longitude=139.7,
    radius=9.0,
    colors=MarkerColors(color="red", fill_color="darkred"),
    popup=("Tokyo, Japan",),
)


def _mock_map(mock_static_map_class):
    mock_map = MagicMock()
    mock_static_map_class.return_value = mock_map
    mock_image = MagicMock()
    mock_map.render.return_value = mock_image
    mock_image.save = lambda buf, format: buf.write(b"PNG_IMAGE_DATA")
    return mock_map


class TestStaticMapClientInit:
    """Tests for StaticMapClient initialization."""

    def test_default_tile_url(self):
        """Default tile URL is OpenStreetMap."""
        client = StaticMapClient()
        assert "openstreetmap" in client.tile_url.lower()

    def test_custom_settings(self):
        client = StaticMapClient(tile_url="https://tiles.example.com/{z}/{x}/{y}.png", width=320, height=200)

        assert client.tile_url.startswith("https://tiles.example.com")
        assert (client.width, client.height) == (320, 200)


class TestStaticMapClientRender:
    """Tests for StaticMapClient.render()."""

    @patch("quake_explorer.shell.static_map_client.StaticMap")
    def test_successful_render_returns_image_bytes(self, mock_static_map_class):
        _mock_map(mock_static_map_class)

        result = StaticMapClient().render(TEST_FOCUS, [TEST_MARKER])

        assert result.success is True
        assert result.image_bytes == b"PNG_IMAGE_DATA"
        assert result.error is None

    @patch("quake_explorer.shell.static_map_client.StaticMap")
    def test_renders_at_focus(self, mock_static_map_class):
        """Map is centered on the focus, in (lon, lat) order."""
        mock_map = _mock_map(mock_static_map_class)

        StaticMapClient().render(TEST_FOCUS, [])

        mock_map.render.assert_called_once_with(zoom=5, center=(139.7, 35.6))

    @patch("quake_explorer.shell.static_map_client.CircleMarker")
    @patch("quake_explorer.shell.static_map_client.StaticMap")
    def test_adds_ring_and_marker_per_event(self, mock_static_map_class, mock_circle):
        mock_map = _mock_map(mock_static_map_class)

        StaticMapClient().render(TEST_FOCUS, [TEST_MARKER, TEST_MARKER])

        assert mock_map.add_marker.call_count == 4
        mock_circle.assert_any_call((139.7, 35.6), "white", 10)
        mock_circle.assert_any_call((139.7, 35.6), "red", 9)

    @patch("quake_explorer.shell.static_map_client.StaticMap")
    def test_failure_returns_error(self, mock_static_map_class):
        mock_map = MagicMock()
        mock_static_map_class.return_value = mock_map
        mock_map.render.side_effect = Exception("tile server down")

        result = StaticMapClient().render(TEST_FOCUS, [TEST_MARKER])

        assert result.success is False
        assert result.image_bytes is None
        assert "tile server down" in result.error
