"""Magnitude histogram - Pure functions.

This module buckets filtered events into fixed magnitude ranges for the
bar chart. All functions are pure with no side effects.

Bins are inclusive at both ends, so magnitudes strictly between 1.9 and 2,
2.9 and 3, or 3.9 and 4 fall into no bin and the counts can sum to less
than the number of events.
"""

import math
from dataclasses import dataclass, replace
from typing import Iterable

from quake_explorer.core.earthquake import SeismicEvent


@dataclass(frozen=True)
class HistogramBin:
    """A magnitude range and the number of events inside it.

    Attributes:
        label: Chart label (e.g., "2-2.9")
        lower_bound: Lowest magnitude in the bin (inclusive)
        upper_bound: Highest magnitude in the bin (inclusive), math.inf for open bins
        count: Number of events in the bin
    """
    label: str
    lower_bound: float
    upper_bound: float
    count: int = 0

    def contains(self, magnitude: float) -> bool:
        """Check if a magnitude is within this bin."""
        return self.lower_bound <= magnitude <= self.upper_bound


MAGNITUDE_BINS: tuple[HistogramBin, ...] = (
    HistogramBin(label="0-1.9", lower_bound=0.0, upper_bound=1.9),
    HistogramBin(label="2-2.9", lower_bound=2.0, upper_bound=2.9),
    HistogramBin(label="3-3.9", lower_bound=3.0, upper_bound=3.9),
    HistogramBin(label="4+", lower_bound=4.0, upper_bound=math.inf),
)


def build_histogram(
    events: Iterable[SeismicEvent],
    bins: tuple[HistogramBin, ...] = MAGNITUDE_BINS,
) -> tuple[HistogramBin, ...]:
    """Count events per magnitude bin.

    Pure function. Each event is counted in the first bin that contains its
    magnitude; events matching no bin are not counted.

    Args:
        events: Filtered events to count
        bins: Bin configuration in display order (counts are ignored)

    Returns:
        The bins in the same order with final counts
    """
    counts = [0] * len(bins)

    for event in events:
        for i, bin_ in enumerate(bins):
            if bin_.contains(event.magnitude):
                counts[i] += 1
                break

    return tuple(replace(bin_, count=count) for bin_, count in zip(bins, counts))


def binned_count(histogram: Iterable[HistogramBin]) -> int:
    """Total number of events that landed in a bin."""
    return sum(b.count for b in histogram)
