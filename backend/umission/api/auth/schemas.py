from umission.api.users.models import UserRoles
from umission.core.response.base_model import CustomBaseModel


class Token(CustomBaseModel):
    token_type: str
    access_token: str
    refresh_token: str


class AuthTokenData(CustomBaseModel):
    user_id: int
    token_type: str


class AuthUser(CustomBaseModel):
    id: int
    full_name: str
    email: str
    role: UserRoles
    avatar: str | None = None
