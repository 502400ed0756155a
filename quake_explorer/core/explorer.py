"""Explorer presentation state - Pure data structures and transitions.

The presentation layer keeps exactly one ExplorerState. Every user action
produces a new state through one of the transitions below; none of them
perform I/O. The fetch itself is done by the shell.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from quake_explorer.core.earthquake import SeismicEvent
from quake_explorer.core.filters import FilterCriteria
from quake_explorer.core.focus import DEFAULT_FOCUS, MapFocus
from quake_explorer.core.pipeline import FilterResult, compute_filter_result


FETCH_ERROR_MESSAGE = "Failed to load earthquake data. Please try again later."

NO_MATCHES_HINT = (
    "No earthquakes match your current filter criteria. "
    "Try adjusting your filters!"
)


class TimeRange(str, Enum):
    """Feed windows offered by USGS summary feeds."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class LoadStatus(str, Enum):
    """Lifecycle of the fetched data."""
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


def parse_time_range(value: str | TimeRange) -> TimeRange:
    """Parse a time range name.

    Raises:
        ValueError: If the value is not day, week or month
    """
    if isinstance(value, TimeRange):
        return value
    try:
        return TimeRange(value.strip().lower())
    except ValueError:
        valid = ", ".join(t.value for t in TimeRange)
        raise ValueError(f"Unknown time range '{value}' (expected one of: {valid})") from None


@dataclass(frozen=True)
class ExplorerState:
    """Everything the explorer view renders.

    Attributes:
        time_range: Feed window currently selected
        status: Loading status of the feed data
        events: Raw events from the last successful fetch
        criteria: Current filter criteria
        result: Output of the filter pipeline for events and criteria
        error: User-facing error message when status is ERROR
    """
    time_range: TimeRange = TimeRange.DAY
    status: LoadStatus = LoadStatus.LOADING
    events: tuple[SeismicEvent, ...] = ()
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    result: FilterResult = field(
        default_factory=lambda: compute_filter_result((), FilterCriteria())
    )
    error: str | None = None

    @property
    def focus(self) -> MapFocus:
        """Focus currently applied to the map."""
        return self.result.focus


def initial_state(
    time_range: TimeRange = TimeRange.DAY,
    criteria: FilterCriteria | None = None,
) -> ExplorerState:
    """Create the state shown before the first fetch completes."""
    criteria = criteria or FilterCriteria()
    return ExplorerState(
        time_range=time_range,
        criteria=criteria,
        result=compute_filter_result((), criteria),
    )


def start_loading(state: ExplorerState, time_range: TimeRange | None = None) -> ExplorerState:
    """Mark a fetch as in progress, clearing any previous error."""
    return replace(
        state,
        time_range=time_range or state.time_range,
        status=LoadStatus.LOADING,
        error=None,
    )


def finish_loading(state: ExplorerState, events: list[SeismicEvent]) -> ExplorerState:
    """Store freshly fetched events and apply the current criteria to them."""
    events_tuple = tuple(events)
    return replace(
        state,
        status=LoadStatus.LOADED,
        events=events_tuple,
        result=compute_filter_result(events_tuple, state.criteria, state.focus),
        error=None,
    )


def fail_loading(state: ExplorerState) -> ExplorerState:
    """Record a failed fetch. Previously loaded events are kept."""
    return replace(state, status=LoadStatus.ERROR, error=FETCH_ERROR_MESSAGE)


def apply_criteria(state: ExplorerState, criteria: FilterCriteria) -> ExplorerState:
    """Re-run the pipeline with new criteria, threading the current focus."""
    return replace(
        state,
        criteria=criteria,
        result=compute_filter_result(state.events, criteria, state.focus),
    )


def reset_filters(state: ExplorerState) -> ExplorerState:
    """Restore default criteria and the default world view."""
    criteria = FilterCriteria()
    return replace(
        state,
        criteria=criteria,
        result=compute_filter_result(state.events, criteria, DEFAULT_FOCUS),
    )


def summarize(state: ExplorerState) -> list[str]:
    """Build the text lines shown above the map.

    Pure function.

    Returns:
        Error, diagnostic, results count and empty-result hint, as applicable
    """
    if state.status == LoadStatus.LOADING:
        return ["Loading earthquake data..."]

    lines = []
    if state.error:
        lines.append(state.error)
    if state.focus.diagnostic:
        lines.append(state.focus.diagnostic)

    lines.append(f"Results: {state.result.count} earthquakes found")

    if state.result.count == 0 and not state.focus.diagnostic:
        lines.append(NO_MATCHES_HINT)

    return lines
