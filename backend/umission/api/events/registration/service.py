"""
Join requests and their approval workflow.

This module is the only writer of ``Events.current_volunteers``. The counter
is kept equal to the number of confirmed registrations of the event by
applying a delta per status transition, as an atomic UPDATE inside the same
transaction as the status write.
"""

import logging
from fastapi import status as http_status
from sqlalchemy import exists, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from umission.api.events.models import (
    EventFeedbacks,
    EventRegistrations,
    Events,
    EventStatus,
    RegistrationStatus,
)
from umission.api.users.models import Users
from umission.core.validations.exceptions import (
    AlreadyRequested,
    NotFound,
    QuotaExceeded,
)
from umission.db.core import commit_or_rollback
from umission.response import CustomHTTPException

logger = logging.getLogger(__name__)

DECISION_STATUSES = (RegistrationStatus.confirmed, RegistrationStatus.rejected)


def counter_delta(old: RegistrationStatus, new: RegistrationStatus) -> int:
    """Change to apply to the confirmed counter for one status transition."""
    if old != RegistrationStatus.confirmed and new == RegistrationStatus.confirmed:
        return 1
    if old == RegistrationStatus.confirmed and new == RegistrationStatus.rejected:
        return -1
    return 0


def registration_to_dict(registration: EventRegistrations) -> dict:
    return {
        column.name: getattr(registration, column.name)
        for column in EventRegistrations.__table__.columns
    }


async def count_confirmed(session: AsyncSession, event_id: int) -> int:
    return await session.scalar(
        select(func.count()).where(
            EventRegistrations.event_id == event_id,
            EventRegistrations.status == RegistrationStatus.confirmed,
        )
    )


async def _get_owned_event(
    session: AsyncSession, event_id: int, organizer: Users | None, lock: bool = False
) -> Events:
    query = select(Events).where(Events.id == event_id)
    if lock:
        query = query.with_for_update().execution_options(populate_existing=True)
    event = await session.scalar(query)
    if not event:
        raise NotFound("Event not found")
    if organizer is not None and event.organizer_id != organizer.id:
        raise CustomHTTPException(
            http_status.HTTP_403_FORBIDDEN, message="Not authorized to manage this event"
        )
    return event


async def join(session: AsyncSession, event_id: int, requester: Users) -> EventRegistrations:
    """
    Create a pending join request for the requester.

    Only confirmed registrations count against the quota; the event row is
    left untouched until an organizer confirms.
    """
    event = await _get_owned_event(session, event_id, organizer=None, lock=True)

    already_requested = await session.scalar(
        select(
            exists().where(
                EventRegistrations.event_id == event.id,
                EventRegistrations.user_id == requester.id,
            )
        )
    )
    if already_requested:
        raise AlreadyRequested()

    if await count_confirmed(session, event.id) >= event.max_volunteers:
        raise QuotaExceeded()

    registration = EventRegistrations(
        event_id=event.id,
        user_id=requester.id,
        user_name=requester.full_name or "Volunteer",
        user_avatar=requester.avatar,
        status=RegistrationStatus.pending,
        event_title=event.title,
        event_date=event.date,
        event_status=event.status,
    )
    session.add(registration)
    try:
        await session.flush()
    except IntegrityError:
        # concurrent duplicate join caught by the (event_id, user_id) constraint
        await session.rollback()
        raise AlreadyRequested()
    await commit_or_rollback(session)
    await session.refresh(registration)
    logger.info("User %s requested to join event %s", requester.id, event.id)
    return registration


async def set_status(
    session: AsyncSession,
    registration_id: int,
    new_status: RegistrationStatus,
    organizer: Users | None = None,
) -> EventRegistrations:
    """
    Confirm or reject a registration and reconcile the event counter.

    Raises NotFound for an unknown registration and QuotaExceeded when a
    confirmation would push the event past its capacity.
    """
    if new_status not in DECISION_STATUSES:
        raise CustomHTTPException(
            http_status.HTTP_400_BAD_REQUEST,
            message="Status must be confirmed or rejected",
            errors={"status": f"invalid status {new_status.value}"},
        )

    registration = await session.scalar(
        select(EventRegistrations)
        .where(EventRegistrations.id == registration_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )
    if not registration:
        raise NotFound("Registration not found")

    event = await _get_owned_event(session, registration.event_id, organizer, lock=True)

    old_status = registration.status
    delta = counter_delta(old_status, new_status)
    if delta > 0 and await count_confirmed(session, event.id) >= event.max_volunteers:
        raise QuotaExceeded()

    registration.status = new_status
    if delta:
        await session.execute(
            update(Events)
            .where(Events.id == event.id)
            .values(current_volunteers=Events.current_volunteers + delta)
            .execution_options(synchronize_session=False)
        )
    await commit_or_rollback(session)
    await session.refresh(registration)
    await session.refresh(event)
    logger.info(
        "Registration %s: %s -> %s (event %s now has %s confirmed)",
        registration.id,
        old_status.value,
        new_status.value,
        event.id,
        event.current_volunteers,
    )
    return registration


async def list_for_event(
    session: AsyncSession, event_id: int, organizer: Users | None = None
) -> list[EventRegistrations]:
    await _get_owned_event(session, event_id, organizer)
    result = await session.scalars(
        select(EventRegistrations)
        .where(EventRegistrations.event_id == event_id)
        .order_by(EventRegistrations.requested_at, EventRegistrations.id)
    )
    return list(result)


async def list_for_user(session: AsyncSession, user_id: int) -> list[dict]:
    """
    The user's registrations, most recent first.

    ``event_status`` is the live status of the event rather than the join-time
    snapshot, and ``has_feedback`` tells whether the user already rated it.
    """
    rows = await session.execute(
        select(EventRegistrations, Events.status)
        .outerjoin(Events, Events.id == EventRegistrations.event_id)
        .where(EventRegistrations.user_id == user_id)
        .order_by(EventRegistrations.requested_at.desc(), EventRegistrations.id.desc())
    )
    rated_event_ids = set(
        await session.scalars(
            select(EventFeedbacks.event_id).where(EventFeedbacks.user_id == user_id)
        )
    )
    return [
        registration_to_dict(registration)
        | {
            "event_status": live_status or EventStatus.upcoming,
            "has_feedback": registration.event_id in rated_event_ids,
        }
        for registration, live_status in rows
    ]
