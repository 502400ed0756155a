#!/usr/bin/env python3
"""Command line earthquake explorer.

Fetches a USGS summary feed, applies the magnitude and location filters and
prints the results, the magnitude histogram and the map focus.

Usage:
    # Everything from the past day
    python scripts/explore.py

    # Past week, M2.5+, events near Tokyo
    python scripts/explore.py --time-range week --min-magnitude 2.5 --location tokyo

    # Also render the map to a PNG
    python scripts/explore.py --location alaska --map alaska.png

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quake_explorer.core.explorer import LoadStatus, TimeRange, summarize
from quake_explorer.core.histogram import binned_count
from quake_explorer.explorer import Explorer
from quake_explorer.shell.config_loader import load_config

log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def print_events(explorer: Explorer, limit: int) -> None:
    """Print the filtered events in feed order."""
    events = explorer.state.result.filtered_events
    print(f"\n{'#':>4}  {'Mag':>5}  {'Depth':>8}  {'Time (UTC)':<19}  Place")
    print("-" * 80)
    for i, event in enumerate(events[:limit], start=1):
        print(
            f"{i:>4}  {event.magnitude:>5.1f}  {event.depth_km:>6.1f}km  "
            f"{event.time.strftime('%Y-%m-%d %H:%M:%S')}  {event.place or 'Unknown location'}"
        )
    if len(events) > limit:
        print(f"... and {len(events) - limit} more")


def print_histogram(explorer: Explorer) -> None:
    """Print the magnitude histogram as a text bar chart."""
    histogram = explorer.state.result.histogram
    peak = max((b.count for b in histogram), default=0) or 1
    print("\nMagnitude distribution:")
    for bin_ in histogram:
        bar = "#" * round(40 * bin_.count / peak)
        print(f"  {bin_.label:>6} | {bar} {bin_.count}")

    unbinned = explorer.state.result.count - binned_count(histogram)
    if unbinned:
        print(f"  ({unbinned} events between bin boundaries not charted)")


def main() -> int:
    parser = argparse.ArgumentParser(description="Explore recent USGS earthquakes")
    parser.add_argument(
        "--time-range",
        choices=[t.value for t in TimeRange],
        help="Feed window (default from config)",
    )
    parser.add_argument("--min-magnitude", type=float, help="Minimum magnitude")
    parser.add_argument("--location", default="", help="Location search term")
    parser.add_argument("--limit", type=int, default=20, help="Max events to print")
    parser.add_argument("--map", metavar="PATH", help="Write a rendered map PNG here")
    args = parser.parse_args()

    explorer = Explorer(load_config())

    state = explorer.load(args.time_range)
    if state.status == LoadStatus.ERROR:
        logger.error(state.error)
        return 1

    if args.min_magnitude is not None:
        explorer.set_min_magnitude(args.min_magnitude)
    if args.location:
        explorer.search_location(args.location)

    for line in summarize(explorer.state):
        print(line)

    print_events(explorer, args.limit)
    print_histogram(explorer)

    focus = explorer.state.focus
    print(
        f"\nMap focus: ({focus.center[0]:.4f}, {focus.center[1]:.4f}) "
        f"zoom {focus.zoom_level}"
    )

    if args.map:
        image = explorer.render_map()
        if not image.success or image.image_bytes is None:
            logger.error("Failed to render map: %s", image.error)
            return 1
        with open(args.map, "wb") as f:
            f.write(image.image_bytes)
        logger.info("Map written to %s", args.map)

    return 0


if __name__ == "__main__":
    sys.exit(main())
