from datetime import date, datetime
from pydantic import Field

from umission.api.events.models import EventStatus, RegistrationStatus
from umission.core.response.base_model import CustomBaseModel


class RegistrationPublic(CustomBaseModel):
    id: int = Field(...)
    event_id: int = Field(...)
    user_id: int = Field(...)
    user_name: str = Field(...)
    user_avatar: str | None = Field(None)
    requested_at: datetime = Field(...)
    status: RegistrationStatus = Field(...)
    event_title: str = Field(...)
    event_date: date = Field(...)
    event_status: EventStatus = Field(...)


class UserRegistrationPublic(RegistrationPublic):
    has_feedback: bool = Field(False)


class RegistrationStatusUpdate(CustomBaseModel):
    status: RegistrationStatus = Field(...)
