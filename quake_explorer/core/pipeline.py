"""Filter pipeline - Pure composition of filtering, histogram and focus.

The presentation layer calls compute_filter_result on every data or
criteria change and keeps whatever focus it returns for the next call.
"""

from dataclasses import dataclass
from typing import Iterable

from quake_explorer.core.earthquake import SeismicEvent
from quake_explorer.core.filters import FilterCriteria, filter_events
from quake_explorer.core.focus import DEFAULT_FOCUS, MapFocus, compute_focus
from quake_explorer.core.histogram import HistogramBin, build_histogram


@dataclass(frozen=True)
class FilterResult:
    """Everything the presentation layer renders for one set of criteria.

    Attributes:
        filtered_events: Matching events, in input order
        histogram: Magnitude bins with counts
        focus: Map center, zoom and optional diagnostic
    """
    filtered_events: tuple[SeismicEvent, ...]
    histogram: tuple[HistogramBin, ...]
    focus: MapFocus

    @property
    def count(self) -> int:
        """Number of events that passed the filters."""
        return len(self.filtered_events)


def compute_filter_result(
    events: Iterable[SeismicEvent],
    criteria: FilterCriteria,
    previous_focus: MapFocus = DEFAULT_FOCUS,
) -> FilterResult:
    """Run the full filter pipeline.

    Pure function.

    Args:
        events: Raw events from the feed
        criteria: Current filter criteria
        previous_focus: Focus in effect before this change

    Returns:
        A fresh FilterResult
    """
    filtered = filter_events(events, criteria)

    return FilterResult(
        filtered_events=tuple(filtered),
        histogram=build_histogram(filtered),
        focus=compute_focus(criteria, filtered, previous_focus),
    )
