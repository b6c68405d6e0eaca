from datetime import date as date_type, datetime
from pydantic import Field

from umission.api.events.models import EventCategories, EventStatus
from umission.core.response.base_model import CustomBaseModel


class EventBase(CustomBaseModel):
    title: str = Field(..., min_length=3, max_length=150)
    date: date_type = Field(...)
    location: str = Field(..., min_length=1, max_length=255)
    category: EventCategories = Field(...)
    max_volunteers: int = Field(..., gt=0)
    description: str = Field("")
    tasks: str = Field("")
    image_url: str | None = Field(None)


class EventCreate(EventBase):
    pass


class EventPublic(EventBase):
    id: int = Field(...)
    organizer_id: int = Field(...)
    organizer_name: str = Field(...)
    current_volunteers: int = Field(...)
    status: EventStatus = Field(...)
    created_at: datetime = Field(...)


class EventDetailResponse(EventPublic):
    rating: float = Field(0)
    total_rating: int = Field(0)


class EventStatusUpdate(CustomBaseModel):
    status: EventStatus
