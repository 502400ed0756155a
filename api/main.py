"""Quake Explorer API - FastAPI service.

Serves filtered USGS earthquake feeds together with the magnitude histogram,
map markers and map focus. Every request runs the pure filter pipeline from
scratch; the client threads the previous map focus through query parameters.

Configuration comes from the YAML file named by CONFIG_PATH, then from the
environment variables load_config_from_env reads, then from
config/config.yaml.
"""

import logging
import math
import os
from datetime import datetime, timezone
from typing import Any

import requests
from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from quake_explorer.core.config import Config
from quake_explorer.core.earthquake import SeismicEvent, parse_events
from quake_explorer.core.explorer import FETCH_ERROR_MESSAGE, TimeRange
from quake_explorer.core.filters import FilterCriteria
from quake_explorer.core.focus import DEFAULT_FOCUS, MapFocus
from quake_explorer.core.histogram import HistogramBin
from quake_explorer.core.markers import MAGNITUDE_LEGEND, Marker, create_markers
from quake_explorer.core.pipeline import FilterResult, compute_filter_result
from quake_explorer.shell.config_loader import load_config, load_config_from_env
from quake_explorer.shell.static_map_client import StaticMapClient
from quake_explorer.shell.usgs_client import USGSFeedClient


log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Quake Explorer API",
    description="Filtered earthquake data, histogram and map focus from USGS feeds",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


# Variables read by load_config_from_env
ENV_CONFIG_VARS = ("USGS_FEED_URL", "TIME_RANGE", "REQUEST_TIMEOUT", "MIN_MAGNITUDE")


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif any(os.environ.get(name) for name in ENV_CONFIG_VARS):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


config = _get_config()
feed_client = USGSFeedClient(
    base_url=config.feed_base_url,
    timeout=config.request_timeout_seconds,
)
map_client = StaticMapClient(
    tile_url=config.tile_url,
    width=config.map_width,
    height=config.map_height,
)


# ===== Response Models =====

class EarthquakeOut(BaseModel):
    id: str
    magnitude: float
    place: str | None
    time: str
    latitude: float
    longitude: float
    depth_km: float
    url: str | None


class MarkerOut(BaseModel):
    event_id: str
    latitude: float
    longitude: float
    radius: float
    color: str
    fill_color: str
    fill_opacity: float
    weight: int
    popup: list[str]


class HistogramBinOut(BaseModel):
    label: str
    lower_bound: float
    upper_bound: float | None  # None for the open-ended top bin
    count: int


class FocusOut(BaseModel):
    latitude: float
    longitude: float
    zoom: int
    diagnostic: str | None


class CriteriaOut(BaseModel):
    min_magnitude: float
    location: str


class EarthquakesResponse(BaseModel):
    time_range: str
    criteria: CriteriaOut
    count: int
    earthquakes: list[EarthquakeOut]
    markers: list[MarkerOut]
    histogram: list[HistogramBinOut]
    focus: FocusOut
    fetched_at: str


# ===== Helper Functions =====

def _earthquake_to_dict(event: SeismicEvent) -> dict[str, Any]:
    """Convert SeismicEvent to API response format."""
    return {
        "id": event.id,
        "magnitude": event.magnitude,
        "place": event.place,
        "time": event.time.isoformat(),
        "latitude": event.latitude,
        "longitude": event.longitude,
        "depth_km": event.depth_km,
        "url": event.url,
    }


def _marker_to_dict(marker: Marker) -> dict[str, Any]:
    """Convert Marker to API response format."""
    return {
        "event_id": marker.event_id,
        "latitude": marker.latitude,
        "longitude": marker.longitude,
        "radius": marker.radius,
        "color": marker.colors.color,
        "fill_color": marker.colors.fill_color,
        "fill_opacity": marker.fill_opacity,
        "weight": marker.weight,
        "popup": list(marker.popup),
    }


def _bin_to_dict(bin_: HistogramBin) -> dict[str, Any]:
    """Convert HistogramBin to API response format (JSON has no infinity)."""
    upper = bin_.upper_bound
    return {
        "label": bin_.label,
        "lower_bound": bin_.lower_bound,
        "upper_bound": None if math.isinf(upper) else upper,
        "count": bin_.count,
    }


def _focus_to_dict(focus: MapFocus) -> dict[str, Any]:
    """Convert MapFocus to API response format."""
    latitude, longitude = focus.center
    return {
        "latitude": latitude,
        "longitude": longitude,
        "zoom": focus.zoom_level,
        "diagnostic": focus.diagnostic,
    }


def _previous_focus(
    focus_lat: float | None,
    focus_lng: float | None,
    focus_zoom: int | None,
) -> MapFocus:
    """Build the previous focus from query params, default when incomplete."""
    if focus_lat is None or focus_lng is None or focus_zoom is None:
        return DEFAULT_FOCUS
    return MapFocus(center=(focus_lat, focus_lng), zoom_level=focus_zoom)


def _fetch_events(time_range: TimeRange) -> list[SeismicEvent]:
    """Fetch and parse a feed, or raise 502."""
    try:
        geojson = feed_client.fetch_feed(time_range)
    except (requests.RequestException, ValueError):
        logger.exception("Failed to fetch from USGS")
        raise HTTPException(status_code=502, detail=FETCH_ERROR_MESSAGE)

    return parse_events(geojson)


def _run_pipeline(
    time_range: TimeRange,
    min_magnitude: float,
    location: str,
    focus_lat: float | None,
    focus_lng: float | None,
    focus_zoom: int | None,
) -> FilterResult:
    """Fetch events and run the filter pipeline for one request."""
    events = _fetch_events(time_range)
    criteria = FilterCriteria(min_magnitude=min_magnitude, location_query=location)
    return compute_filter_result(
        events,
        criteria,
        _previous_focus(focus_lat, focus_lng, focus_zoom),
    )


# ===== Public Endpoints =====

@app.get("/api-earthquakes", response_model=EarthquakesResponse)
async def get_earthquakes(
    time_range: TimeRange = Query(default=TimeRange.DAY),
    min_magnitude: float = Query(default=0.0, ge=0),
    location: str = Query(default=""),
    focus_lat: float | None = Query(default=None, ge=-90, le=90),
    focus_lng: float | None = Query(default=None, ge=-180, le=180),
    focus_zoom: int | None = Query(default=None, ge=0, le=20),
):
    """Get filtered earthquakes, histogram, markers and map focus."""
    result = _run_pipeline(
        time_range, min_magnitude, location, focus_lat, focus_lng, focus_zoom,
    )

    return {
        "time_range": time_range.value,
        "criteria": {"min_magnitude": min_magnitude, "location": location},
        "count": result.count,
        "earthquakes": [_earthquake_to_dict(e) for e in result.filtered_events],
        "markers": [_marker_to_dict(m) for m in create_markers(result.filtered_events)],
        "histogram": [_bin_to_dict(b) for b in result.histogram],
        "focus": _focus_to_dict(result.focus),
        "fetched_at": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/api-map.png")
async def get_map_image(
    time_range: TimeRange = Query(default=TimeRange.DAY),
    min_magnitude: float = Query(default=0.0, ge=0),
    location: str = Query(default=""),
    focus_lat: float | None = Query(default=None, ge=-90, le=90),
    focus_lng: float | None = Query(default=None, ge=-180, le=180),
    focus_zoom: int | None = Query(default=None, ge=0, le=20),
):
    """Render the filtered earthquakes on a static map."""
    result = _run_pipeline(
        time_range, min_magnitude, location, focus_lat, focus_lng, focus_zoom,
    )

    image = map_client.render(result.focus, create_markers(result.filtered_events))
    if not image.success or image.image_bytes is None:
        raise HTTPException(status_code=502, detail="Failed to render map")

    return Response(content=image.image_bytes, media_type="image/png")


@app.get("/api-legend")
async def get_legend():
    """Magnitude color legend shown next to the map."""
    return {
        "legend": [
            {"label": label, "color": color}
            for label, color in MAGNITUDE_LEGEND
        ]
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for Cloud Run."""
    return {"status": "healthy"}
