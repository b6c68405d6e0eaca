from typing import List
from fastapi import APIRouter

from umission.api.users.schemas import (
    BookmarkToggleResponse,
    UserCreate,
    UserPrivate,
    UserPublic,
)
from umission.api.events.schemas import EventPublic
from umission.db.core import SessionDep
from umission.api.users import service
from umission.core.auth.dependencies import DependsAuth

router = APIRouter(prefix="/user")


@router.post("/register", response_model=UserPublic, summary="Register a new user")
async def register_user(user: UserCreate, session: SessionDep):
    return await service.create_user(
        session,
        full_name=user.full_name,
        email=user.email,
        password=user.password,
        role=user.role,
    )


@router.get("/me", summary="view own account")
async def get_me(user: DependsAuth) -> UserPrivate:
    return user


@router.post("/bookmarks/{event_id}/toggle", summary="Bookmark or un-bookmark an event")
async def toggle_bookmark(
    session: SessionDep, user: DependsAuth, event_id: int
) -> BookmarkToggleResponse:
    bookmarks = await service.toggle_bookmark(session, user, event_id)
    return {
        "event_id": event_id,
        "bookmarked": event_id in bookmarks,
        "bookmarks": bookmarks,
    }


@router.get("/bookmarks", summary="List bookmarked events")
async def list_bookmarks(session: SessionDep, user: DependsAuth) -> List[EventPublic]:
    return await service.list_bookmarked_events(session, user)
