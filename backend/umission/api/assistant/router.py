from fastapi import APIRouter

from umission.api.assistant import service
from umission.api.assistant.schemas import ChatRequest, ChatResponse
from umission.core.auth.dependencies import DependsAuth
from umission.db.core import SessionDep

router = APIRouter(prefix="/assistant")


@router.post("/chat", summary="Ask the campus assistant")
async def chat(session: SessionDep, user: DependsAuth, body: ChatRequest) -> ChatResponse:
    reply = await service.chat(
        session,
        prompt=body.message,
        history=[turn.model_dump() for turn in body.history],
    )
    return {"reply": reply}
