"""Feed filters applied on top of the full event list."""

from typing import Iterable

from umission.api.events.models import Events

ALL = "All"

# Coarse campus areas, matched by substring against the free-text location.
LOCATION_BUCKETS: dict[str, tuple[str, ...]] = {
    "KK": ("KK", "College", "Nazrin"),
    "Faculty": ("FCSIT", "Faculty", "Block"),
    "Outdoors": ("Tasik", "Rimba"),
}


def in_location_bucket(location: str, bucket: str) -> bool:
    markers = LOCATION_BUCKETS.get(bucket)
    if markers is None:
        return False
    return any(marker in (location or "") for marker in markers)


def filter_events(
    events: Iterable[Events],
    category: str | None = None,
    location: str | None = None,
    search: str | None = None,
) -> list[Events]:
    result = list(events)
    if category and category != ALL:
        result = [e for e in result if e.category.value == category]
    if location and location != ALL:
        result = [e for e in result if in_location_bucket(e.location, location)]
    if search:
        term = search.lower()
        result = [e for e in result if term in e.title.lower()]
    return result
