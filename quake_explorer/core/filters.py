"""Event filtering - Pure functions.

This module narrows a collection of seismic events down to those matching
the user's filter criteria. All functions are pure with no side effects.
"""

from dataclasses import dataclass
from typing import Iterable

from quake_explorer.core.earthquake import SeismicEvent


@dataclass(frozen=True)
class FilterCriteria:
    """User-controlled filter settings.

    Attributes:
        min_magnitude: Minimum magnitude to display (inclusive)
        location_query: Case-insensitive substring matched against place
    """
    min_magnitude: float = 0.0
    location_query: str = ""


def has_location_query(criteria: FilterCriteria) -> bool:
    """Return True if the criteria carry a non-blank location query."""
    return criteria.location_query.strip() != ""


def matches_magnitude(event: SeismicEvent, criteria: FilterCriteria) -> bool:
    """Check if event magnitude meets the minimum.

    Pure function.
    """
    return event.magnitude >= criteria.min_magnitude


def matches_location(event: SeismicEvent, criteria: FilterCriteria) -> bool:
    """Check if event place contains the location query.

    Pure function.

    Returns True if:
    - The query is blank (matches all events), OR
    - The event has a place that contains the query, ignoring case

    Events without a place never match a non-blank query.
    """
    if not has_location_query(criteria):
        return True

    if not event.place:
        return False

    return criteria.location_query.lower() in event.place.lower()


def matches_criteria(event: SeismicEvent, criteria: FilterCriteria) -> bool:
    """Evaluate both predicates, magnitude first."""
    return matches_magnitude(event, criteria) and matches_location(event, criteria)


def filter_events(
    events: Iterable[SeismicEvent],
    criteria: FilterCriteria,
) -> list[SeismicEvent]:
    """Filter events to only those matching the criteria.

    Pure function. The input is never mutated and the relative order of
    surviving events is preserved. An empty result is a valid outcome.

    Args:
        events: Events to filter, in display order
        criteria: Filter criteria to apply

    Returns:
        New list of matching events
    """
    return [e for e in events if matches_criteria(e, criteria)]
