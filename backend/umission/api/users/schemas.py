from pydantic import Field, EmailStr

from umission.api.users.models import UserRoles
from umission.core.response.base_model import CustomBaseModel


class UserBase(CustomBaseModel):
    full_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(...)


class UserCreate(UserBase):
    password: str = Field(..., min_length=6)
    role: UserRoles = Field(UserRoles.volunteer)


class UserPublic(UserBase):
    id: int = Field(...)
    role: UserRoles = Field(...)
    avatar: str | None = Field(None)


class UserPrivate(UserPublic):
    bookmarks: list[int] = Field([])


class BookmarkToggleResponse(CustomBaseModel):
    event_id: int
    bookmarked: bool
    bookmarks: list[int]
