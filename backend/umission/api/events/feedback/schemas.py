from datetime import datetime
from pydantic import Field

from umission.core.response.base_model import CustomBaseModel


class FeedbackCreate(CustomBaseModel):
    # range is enforced by the service so callers get INVALID_RATING
    rating: int = Field(...)
    comment: str = Field("", max_length=2000)


class FeedbackPublic(CustomBaseModel):
    id: int
    event_id: int
    user_id: int
    rating: int
    comment: str
    created_at: datetime


class FeedbackAverageResponse(CustomBaseModel):
    event_id: int
    average: float
