from datetime import datetime, timezone
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, field_validator, field_serializer


class CustomBaseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    @field_validator("*", mode="before")
    @classmethod
    def ensure_utc_timezone(cls, value: Any) -> Any:
        """
        Validate and convert input datetime to UTC.

        Handles:
        - Naive datetimes (assume UTC)
        - Datetimes in other timezones (convert to UTC)
        """
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=timezone.utc)

            if value.tzinfo != timezone.utc:
                return value.astimezone(timezone.utc)

        return value

    @field_serializer("*")
    def serialize_datetime(self, value: Any, _info: Any) -> Union[str, Any]:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.isoformat()
        return value
