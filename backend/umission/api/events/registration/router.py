from typing import List
from fastapi import APIRouter

from umission.api.events.registration import service
from umission.api.events.registration.schemas import (
    RegistrationPublic,
    RegistrationStatusUpdate,
    UserRegistrationPublic,
)
from umission.core.auth.dependencies import DependsAuth, OrganizerAuth, VolunteerAuth
from umission.db.core import SessionDep

router = APIRouter(prefix="/registration")


@router.get("/me", summary="List my join requests, most recent first")
async def list_my_registrations(
    session: SessionDep, user: DependsAuth
) -> List[UserRegistrationPublic]:
    return await service.list_for_user(session, user.id)


@router.post("/{event_id}/join", summary="Request to join an event")
async def join_event(
    session: SessionDep, user: VolunteerAuth, event_id: int
) -> RegistrationPublic:
    return await service.join(session, event_id=event_id, requester=user)


@router.post("/{registration_id}/status", summary="Confirm or reject a join request")
async def update_registration_status(
    session: SessionDep,
    user: OrganizerAuth,
    registration_id: int,
    body: RegistrationStatusUpdate,
) -> RegistrationPublic:
    return await service.set_status(
        session, registration_id=registration_id, new_status=body.status, organizer=user
    )


@router.get("/{event_id}/list", summary="List all join requests for an event")
async def list_event_registrations(
    session: SessionDep, user: OrganizerAuth, event_id: int
) -> List[RegistrationPublic]:
    return await service.list_for_event(session, event_id=event_id, organizer=user)
