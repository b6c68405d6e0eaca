from typing import List
from fastapi import APIRouter, Query

from umission.api.events.feedback import service
from umission.api.events.feedback.schemas import (
    FeedbackAverageResponse,
    FeedbackCreate,
    FeedbackPublic,
)
from umission.core.auth.dependencies import DependsAuth, VolunteerAuth
from umission.db.core import SessionDep

router = APIRouter(prefix="/feedback")


@router.post("/{event_id}/submit", summary="Rate an event")
async def submit_feedback(
    session: SessionDep, user: VolunteerAuth, event_id: int, feedback: FeedbackCreate
) -> FeedbackPublic:
    return await service.submit(
        session,
        event_id=event_id,
        user=user,
        rating=feedback.rating,
        comment=feedback.comment,
    )


@router.get("/{event_id}/average", summary="Average rating of an event")
async def get_average(
    session: SessionDep, user: DependsAuth, event_id: int
) -> FeedbackAverageResponse:
    average = await service.average_for(session, event_id)
    return {"event_id": event_id, "average": average}


@router.get("/list", summary="List feedback by author and/or event")
async def list_feedback(
    session: SessionDep,
    user: DependsAuth,
    user_id: int | None = Query(None),
    event_id: int | None = Query(None),
) -> List[FeedbackPublic]:
    return await service.list_for(session, user_id=user_id, event_id=event_id)
