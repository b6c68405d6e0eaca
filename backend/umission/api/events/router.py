from typing import List
from fastapi import APIRouter, Query

from umission.db.core import SessionDep
from umission.api.events import service
from umission.api.events.models import EventStatus
from umission.api.events.schemas import (
    EventCreate,
    EventDetailResponse,
    EventPublic,
    EventStatusUpdate,
)
from umission.core.auth.dependencies import DependsAuth, OrganizerAuth
from umission.api.events.registration.router import router as registration_router
from umission.api.events.feedback.router import router as feedback_router

router = APIRouter(prefix="/events")

router.include_router(registration_router, tags=["Registration"])
router.include_router(feedback_router, tags=["Feedback"])


@router.post("/create", summary="Create a new event")
async def create_event(
    session: SessionDep, user: OrganizerAuth, event: EventCreate
) -> EventPublic:
    return await service.create_event(session, event, organizer=user)


@router.get("/list", summary="List events with optional feed filters")
async def list_events(
    session: SessionDep,
    user: DependsAuth,
    category: str | None = Query(None),
    location: str | None = Query(None, description="KK, Faculty or Outdoors"),
    search: str | None = Query(None),
    status: EventStatus | None = Query(None),
) -> List[EventPublic]:
    return await service.list_events(
        session, category=category, location=location, search=search, status=status
    )


@router.get("/organizer/me", summary="List events created by me")
async def list_my_events(session: SessionDep, user: OrganizerAuth) -> List[EventPublic]:
    return await service.list_organizer_events(session, organizer_id=user.id)


@router.get("/{event_id}", summary="Get event details")
async def get_event(
    session: SessionDep, user: DependsAuth, event_id: int
) -> EventDetailResponse:
    return await service.get_event(session, event_id)


@router.post("/{event_id}/status", summary="Conclude an event")
async def update_event_status(
    session: SessionDep, user: OrganizerAuth, event_id: int, body: EventStatusUpdate
) -> EventPublic:
    return await service.update_event_status(
        session, event_id=event_id, status=body.status, organizer=user
    )
