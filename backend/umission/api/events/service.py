import logging
import time
from fastapi import status as http_status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from umission.api.events.filters import filter_events
from umission.api.events.models import Events, EventStatus
from umission.api.events.schemas import EventCreate
from umission.api.events.feedback import service as feedback_service
from umission.api.users.models import Users
from umission.config import settings
from umission.core.validations.exceptions import NotFound
from umission.db.core import commit_or_rollback
from umission.response import CustomHTTPException

logger = logging.getLogger(__name__)

# Lifecycle is one-way: an event can only be concluded.
ALLOWED_STATUS_TRANSITIONS = {(EventStatus.upcoming, EventStatus.completed)}


def placeholder_image_url() -> str:
    return settings.DEFAULT_EVENT_IMAGE_URL.format(seed=int(time.time() * 1000))


async def create_event(
    session: AsyncSession, event: EventCreate, organizer: Users
) -> Events:
    """Create an event owned by the organizer. Counter and status always start fresh."""
    db_event = Events(
        title=event.title,
        date=event.date,
        location=event.location,
        category=event.category,
        max_volunteers=event.max_volunteers,
        description=event.description,
        tasks=event.tasks,
        image_url=event.image_url or placeholder_image_url(),
        organizer_id=organizer.id,
        organizer_name=organizer.full_name,
        current_volunteers=0,
        status=EventStatus.upcoming,
    )
    session.add(db_event)
    await commit_or_rollback(session)
    await session.refresh(db_event)
    logger.info("Organizer %s created event %s", organizer.id, db_event.id)
    return db_event


async def get_event_or_404(session: AsyncSession, event_id: int) -> Events:
    event = await session.scalar(select(Events).where(Events.id == event_id))
    if not event:
        raise NotFound("Event not found")
    return event


async def get_event(session: AsyncSession, event_id: int) -> dict:
    event = await get_event_or_404(session, event_id)
    feedbacks = await feedback_service.list_for(session, event_id=event_id)
    return {
        **{column.name: getattr(event, column.name) for column in Events.__table__.columns},
        "rating": feedback_service.average_rating([f.rating for f in feedbacks]),
        "total_rating": len(feedbacks),
    }


async def list_events(
    session: AsyncSession,
    category: str | None = None,
    location: str | None = None,
    search: str | None = None,
    status: EventStatus | None = None,
) -> list[Events]:
    query = select(Events).order_by(Events.date, Events.id)
    if status is not None:
        query = query.where(Events.status == status)
    events = await session.scalars(query)
    return filter_events(events, category=category, location=location, search=search)


async def list_organizer_events(session: AsyncSession, organizer_id: int) -> list[Events]:
    events = await session.scalars(
        select(Events)
        .where(Events.organizer_id == organizer_id)
        .order_by(Events.date, Events.id)
    )
    return list(events)


async def update_event_status(
    session: AsyncSession, event_id: int, status: EventStatus, organizer: Users
) -> Events:
    event = await get_event_or_404(session, event_id)
    if event.organizer_id != organizer.id:
        raise CustomHTTPException(
            http_status.HTTP_403_FORBIDDEN, message="Not authorized to manage this event"
        )
    if (event.status, status) not in ALLOWED_STATUS_TRANSITIONS:
        raise CustomHTTPException(
            http_status.HTTP_400_BAD_REQUEST,
            message="Invalid status transition",
            error_code="INVALID_STATUS_TRANSITION",
            errors={"status": f"{event.status.value} -> {status.value} is not allowed"},
        )
    event.status = status
    await commit_or_rollback(session)
    await session.refresh(event)
    logger.info("Event %s moved to %s", event.id, status.value)
    return event
