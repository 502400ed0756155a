"""Static Map Client - Imperative Shell.

This module renders the current map focus and event markers to a PNG using
OpenStreetMap tiles. All I/O is contained here; marker styling and focus
are computed in the core module.
"""

import io
import logging
from dataclasses import dataclass

from staticmap import StaticMap, CircleMarker

from quake_explorer.core.config import DEFAULT_TILE_URL
from quake_explorer.core.focus import MapFocus
from quake_explorer.core.markers import Marker


logger = logging.getLogger(__name__)


@dataclass
class MapImageResult:
    """Result of map image generation.

    Attributes:
        success: Whether the image was generated successfully
        image_bytes: PNG image data if successful
        error: Error message if failed
    """
    success: bool
    image_bytes: bytes | None = None
    error: str | None = None


class StaticMapClient:
    """Client for rendering map images.

    This is part of the imperative shell - it handles I/O (fetching map tiles
    and rendering images).
    """

    def __init__(
        self,
        tile_url: str | None = None,
        width: int = 800,
        height: int = 500,
    ) -> None:
        """Initialize static map client.

        Args:
            tile_url: Custom tile URL template. Defaults to OpenStreetMap.
            width: Image width in pixels
            height: Image height in pixels
        """
        self.tile_url = tile_url or DEFAULT_TILE_URL
        self.width = width
        self.height = height

    def render(self, focus: MapFocus, markers: list[Marker]) -> MapImageResult:
        """Render the focused map with one circle per marker.

        This method performs I/O (fetches map tiles from tile server).

        Args:
            focus: Map center and zoom from the core module
            markers: Styled markers from the core module

        Returns:
            MapImageResult with image bytes or error
        """
        latitude, longitude = focus.center

        logger.info(
            "Rendering map for (%.4f, %.4f) at zoom %d with %d markers",
            latitude,
            longitude,
            focus.zoom_level,
            len(markers),
        )

        try:
            static_map = StaticMap(
                self.width,
                self.height,
                url_template=self.tile_url,
            )

            for marker in markers:
                # White ring first so it renders behind the colored circle
                static_map.add_marker(CircleMarker(
                    (marker.longitude, marker.latitude),  # (lon, lat) order for staticmap
                    "white",
                    int(marker.radius) + marker.weight,
                ))
                static_map.add_marker(CircleMarker(
                    (marker.longitude, marker.latitude),
                    marker.colors.color,
                    int(marker.radius),
                ))

            image = static_map.render(
                zoom=focus.zoom_level,
                center=(longitude, latitude),
            )

            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
            image_bytes = buffer.getvalue()

            logger.info(
                "Rendered map image: %d bytes",
                len(image_bytes),
            )

            return MapImageResult(
                success=True,
                image_bytes=image_bytes,
            )

        except Exception as e:
            logger.error("Failed to render map: %s", str(e))
            return MapImageResult(
                success=False,
                error=str(e),
            )
