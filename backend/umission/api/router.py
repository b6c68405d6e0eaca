from fastapi import APIRouter
from umission.api.auth.router import router as auth_router
from umission.api.users.router import router as user_router
from umission.api.events.router import router as events_router
from umission.api.badges.router import router as badges_router
from umission.api.assistant.router import router as assistant_router

api_router = APIRouter(
    prefix="/api/v1",
    responses={404: {"description": "Not found"}},
)

api_router.include_router(router=auth_router, tags=["auth"])
api_router.include_router(router=user_router, tags=["user"])
api_router.include_router(router=events_router, tags=["events"])
api_router.include_router(router=badges_router, tags=["badges"])
api_router.include_router(router=assistant_router, tags=["assistant"])
