import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence
from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from umission.api.events.models import EventFeedbacks, Events
from umission.api.users.models import Users
from umission.core.validations.exceptions import DuplicateFeedback, InvalidRating
from umission.core.validations.schema import validate_relations
from umission.db.core import commit_or_rollback

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def average_rating(ratings: Sequence[int]) -> float:
    """Mean of the ratings rounded half-up to one decimal, 0 when there are none."""
    if not ratings:
        return 0.0
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


async def has_feedback(session: AsyncSession, user_id: int, event_id: int) -> bool:
    return await session.scalar(
        select(
            exists().where(
                EventFeedbacks.user_id == user_id, EventFeedbacks.event_id == event_id
            )
        )
    )


async def submit(
    session: AsyncSession,
    event_id: int,
    user: Users,
    rating: int,
    comment: str = "",
) -> EventFeedbacks:
    """Record the author's single rating for an event."""
    if not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidRating(rating)
    await validate_relations(session, {"event": (Events, event_id)})
    if await has_feedback(session, user.id, event_id):
        raise DuplicateFeedback()

    feedback = EventFeedbacks(
        event_id=event_id,
        user_id=user.id,
        rating=rating,
        comment=comment or "",
    )
    session.add(feedback)
    try:
        await session.flush()
    except IntegrityError:
        # lost a race with a concurrent submission
        await session.rollback()
        raise DuplicateFeedback()
    await commit_or_rollback(session)
    await session.refresh(feedback)
    logger.info("User %s rated event %s with %s", user.id, event_id, rating)
    return feedback


async def average_for(session: AsyncSession, event_id: int) -> float:
    ratings = await session.scalars(
        select(EventFeedbacks.rating).where(EventFeedbacks.event_id == event_id)
    )
    return average_rating(list(ratings))


async def list_for(
    session: AsyncSession, user_id: int | None = None, event_id: int | None = None
) -> list[EventFeedbacks]:
    query = select(EventFeedbacks).order_by(EventFeedbacks.created_at.desc())
    if user_id is not None:
        query = query.where(EventFeedbacks.user_id == user_id)
    if event_id is not None:
        query = query.where(EventFeedbacks.event_id == event_id)
    return list(await session.scalars(query))
