from typing import Annotated, List, Union
from fastapi import Depends, status
from jwt.exceptions import InvalidTokenError, ExpiredSignatureError
from pydantic import ValidationError

from umission.core.auth.authentication import get_user, oauth2_scheme
from umission.api.users.models import Users
from umission.response import CustomHTTPException
from umission.api.auth.schemas import AuthTokenData
from umission.core.auth.jwt import decode_jwt_token
from umission.core.validations.exceptions import Unauthenticated
from umission.db.core import SessionDep


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)], session: SessionDep
) -> Users | None:
    if not token:
        return None
    try:
        payload = decode_jwt_token(token)
        token_data = AuthTokenData(**payload)
    except ExpiredSignatureError:
        raise Unauthenticated("Token has expired")
    except (InvalidTokenError, ValidationError):
        raise Unauthenticated()
    if token_data.token_type != "access_token":
        raise Unauthenticated()
    user = await get_user(session, token_data.user_id)
    if user is None:
        raise Unauthenticated()
    return user


def check_user_role(required_roles: Union[str, List[str]]):
    """
    Creates a dependency that resolves the acting user and checks their role.

    Args:
        required_roles: Single role string or list of role strings that are allowed

    Returns:
        Dependency function returning the acting user
    """
    if isinstance(required_roles, str):
        required_roles = [required_roles]

    async def role_checker(
        current_user: Annotated[Users | None, Depends(get_current_user)],
    ) -> Users:
        if not current_user:
            raise Unauthenticated()
        if current_user.role.value not in required_roles:
            raise CustomHTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                message="Not Authorized",
                error_code="INSUFFICIENT_PERMISSIONS",
            )
        return current_user

    return role_checker


DependsAuth = Annotated[Users, Depends(check_user_role(["volunteer", "organizer"]))]
VolunteerAuth = Annotated[Users, Depends(check_user_role("volunteer"))]
OrganizerAuth = Annotated[Users, Depends(check_user_role("organizer"))]
