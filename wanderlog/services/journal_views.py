"""
Derived journal views - trip filtering/grouping and "places to visit".

Pure functions over already-fetched records; nothing here touches the store
and nothing computed here is persisted.
"""
from typing import Dict, Iterable, List, Optional, Sequence

from wanderlog.models.memory import Memory
from wanderlog.models.trip import Trip, TripCategory

# Tag fragments that mark a memory as a place still to visit
PLACES_TO_VISIT_MARKERS = ("future", "visit", "todo")

EMPTY_JOURNAL_MESSAGE = "No trips yet. Start your travel journal!"
NO_MATCHES_MESSAGE = "No trips match your filters."


def _contains(haystack: Optional[str], needle: str) -> bool:
    if haystack is None:
        return False
    return needle.lower() in haystack.lower()


def _normalize_query(query: Optional[str]) -> str:
    return (query or "").strip()


def filter_trips(
    trips: Iterable[Trip],
    category: Optional[TripCategory] = None,
    query: Optional[str] = None,
) -> List[Trip]:
    """
    Keep trips matching the category (or any, when None) whose location
    contains the query as a case-insensitive substring.

    Input order is preserved.
    """
    needle = _normalize_query(query)
    return [
        trip for trip in trips
        if (category is None or trip.category == category)
        and (not needle or _contains(trip.location, needle))
    ]


def group_trips_by_location(trips: Iterable[Trip]) -> Dict[str, List[Trip]]:
    """
    Bucket trips by exact location string.

    Buckets are ordered by first-seen location; trips inside a bucket keep
    their input order.
    """
    groups: Dict[str, List[Trip]] = {}
    for trip in trips:
        groups.setdefault(trip.location, []).append(trip)
    return groups


def build_trip_listing(
    trips: Sequence[Trip],
    category: Optional[TripCategory] = None,
    query: Optional[str] = None,
) -> dict:
    """
    Filter then group a user's trips, with an empty-state message when
    nothing is left to show.
    """
    matching = filter_trips(trips, category, query)
    groups = group_trips_by_location(matching)

    empty_message = None
    if not matching:
        empty_message = EMPTY_JOURNAL_MESSAGE if not trips else NO_MATCHES_MESSAGE

    return {
        "category": category,
        "query": _normalize_query(query),
        "total": len(matching),
        "groups": [
            {"location": location, "trips": location_trips}
            for location, location_trips in groups.items()
        ],
        "is_empty": not matching,
        "empty_message": empty_message,
    }


def is_place_to_visit(memory: Memory) -> bool:
    """True if any tag contains "future", "visit" or "todo" (case-insensitive)."""
    for tag in memory.tags or []:
        lowered = tag.lower()
        if any(marker in lowered for marker in PLACES_TO_VISIT_MARKERS):
            return True
    return False


def matches_memory_query(memory: Memory, query: Optional[str]) -> bool:
    """Case-insensitive substring match on title or description; a blank query matches all."""
    needle = _normalize_query(query)
    if not needle:
        return True
    return _contains(memory.title, needle) or _contains(memory.description, needle)


def places_to_visit(memories: Iterable[Memory], query: Optional[str] = None) -> List[Memory]:
    return [
        memory for memory in memories
        if is_place_to_visit(memory) and matches_memory_query(memory, query)
    ]
