import logging
from urllib.parse import quote
from fastapi import status as http_status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from umission.api.users.models import UserRoles, Users
from umission.api.events.models import Events
from umission.core.auth.authentication import get_password_hash
from umission.core.validations.schema import validate_relations, validate_unique
from umission.db.core import commit_or_rollback
from umission.response import CustomHTTPException

logger = logging.getLogger(__name__)


def default_avatar(full_name: str) -> str:
    return (
        f"https://ui-avatars.com/api/?name={quote(full_name)}"
        "&color=fff&background=10b981"
    )


async def create_user(
    session: AsyncSession,
    full_name: str,
    email: str,
    password: str | None = None,
    role: UserRoles = UserRoles.volunteer,
    avatar: str | None = None,
) -> Users:
    email = email.strip().lower()
    await validate_unique(session, unique={"email": (Users, email)})
    user = Users(
        full_name=full_name,
        email=email,
        password=get_password_hash(password) if password else None,
        role=role,
        avatar=avatar or default_avatar(full_name),
        bookmarks=[],
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError:
        # concurrent registration with the same email
        await session.rollback()
        raise CustomHTTPException(
            status_code=http_status.HTTP_400_BAD_REQUEST,
            message="Invalid Request",
            errors={"email": "email already exists"},
        )
    await commit_or_rollback(session)
    await session.refresh(user)
    logger.info("Registered %s account %s", role.value, user.id)
    return user


async def toggle_bookmark(session: AsyncSession, user: Users, event_id: int) -> list[int]:
    """Add the event to the user's bookmarks, or remove it if already there."""
    await validate_relations(session, {"event": (Events, event_id)})
    bookmarks = list(user.bookmarks or [])
    if event_id in bookmarks:
        bookmarks = [bookmark for bookmark in bookmarks if bookmark != event_id]
    else:
        bookmarks.append(event_id)
    # reassign so the JSON column is flagged dirty
    user.bookmarks = bookmarks
    await commit_or_rollback(session)
    return bookmarks


async def list_bookmarked_events(session: AsyncSession, user: Users) -> list[Events]:
    if not user.bookmarks:
        return []
    result = await session.scalars(
        select(Events).where(Events.id.in_(user.bookmarks)).order_by(Events.date)
    )
    return list(result)
