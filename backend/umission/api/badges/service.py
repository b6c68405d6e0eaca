"""
Achievement badges derived from a user's registration history.

Nothing here is persisted: badges and merit points are recomputed from
``registration.service.list_for_user`` on every request.
"""

from typing import Any, Iterable, Mapping
from sqlalchemy.ext.asyncio import AsyncSession

from umission.api.badges.schemas import Badge
from umission.api.events.models import EventStatus, RegistrationStatus
from umission.api.events.registration import service as registration_service

POINTS_PER_EVENT = 5

FIRST_STEP = Badge(
    id="b_1",
    name="First Step",
    icon="🌱",
    description="Joined your first UM event",
    color="bg-green-100 text-green-800",
)
KK_SPIRIT = Badge(
    id="b_2",
    name="KK Spirit",
    icon="🏠",
    description="Active in Residential Colleges",
    color="bg-blue-100 text-blue-800",
)
ECO_WARRIOR = Badge(
    id="b_3",
    name="Eco Warrior",
    icon="♻️",
    description="Helping UM go Green",
    color="bg-emerald-100 text-emerald-800",
)

RESIDENTIAL_COLLEGE_MARKERS = ("KK", "College")
ECO_KEYWORDS = ("tree", "tasik", "clean", "environment")


def _get(entry: Mapping[str, Any] | Any, key: str):
    if isinstance(entry, Mapping):
        return entry.get(key)
    return getattr(entry, key, None)


def completed_registrations(registrations: Iterable) -> list:
    """Confirmed registrations whose event has since been concluded."""
    return [
        entry
        for entry in registrations
        if _get(entry, "status") == RegistrationStatus.confirmed
        and _get(entry, "event_status") == EventStatus.completed
    ]


def evaluate_badges(registrations: Iterable) -> list[Badge]:
    completed = completed_registrations(registrations)
    titles = [_get(entry, "event_title") or "" for entry in completed]

    badges = []
    if completed:
        badges.append(FIRST_STEP)
    if any(marker in title for title in titles for marker in RESIDENTIAL_COLLEGE_MARKERS):
        badges.append(KK_SPIRIT)
    if any(keyword in title.lower() for title in titles for keyword in ECO_KEYWORDS):
        badges.append(ECO_WARRIOR)
    return badges


def merit_points(registrations: Iterable) -> int:
    return POINTS_PER_EVENT * len(completed_registrations(registrations))


async def get_user_achievements(session: AsyncSession, user_id: int) -> dict:
    registrations = await registration_service.list_for_user(session, user_id)
    return {
        "badges": evaluate_badges(registrations),
        "merit_points": merit_points(registrations),
        "completed_events": len(completed_registrations(registrations)),
    }
