from typing import Literal
from pydantic import Field

from umission.core.response.base_model import CustomBaseModel


class ChatTurn(CustomBaseModel):
    role: Literal["user", "model"]
    text: str


class ChatRequest(CustomBaseModel):
    message: str = Field(..., min_length=1, max_length=4000)
    history: list[ChatTurn] = Field([])


class ChatResponse(CustomBaseModel):
    reply: str
