from fastapi import APIRouter

from umission.api.badges import service
from umission.api.badges.schemas import AchievementsResponse
from umission.core.auth.dependencies import DependsAuth
from umission.db.core import SessionDep

router = APIRouter(prefix="/badges")


@router.get("/me", summary="Badges and merit points earned so far")
async def get_my_achievements(
    session: SessionDep, user: DependsAuth
) -> AchievementsResponse:
    return await service.get_user_achievements(session, user.id)
