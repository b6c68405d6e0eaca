from datetime import timedelta
from typing import Annotated
from fastapi import APIRouter, Depends, Form
from fastapi.security import OAuth2PasswordRequestForm
from fastapi import status
import jwt

from umission.core.auth.jwt import create_access_token, decode_jwt_token
from umission.core.auth.authentication import authenticate_user, get_user
from umission.core.auth.dependencies import DependsAuth
from umission.core.validations.exceptions import Unauthenticated
from umission.response import CustomHTTPException
from umission.api.auth.schemas import AuthTokenData, AuthUser, Token
from umission.api.auth import service
from umission.db.core import SessionDep

router = APIRouter(prefix="/auth")


@router.post("/token", summary="get access token")
async def login_for_access_token(
    session: SessionDep,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
) -> Token:
    user = await authenticate_user(session, form_data.username, form_data.password)
    if not user:
        raise CustomHTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message="Invalid Email or Password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return service.create_access_refresh_tokens(user)


@router.post("/refresh", summary="refresh access token")
async def refresh_access_token(session: SessionDep, token: str = Form(...)) -> Token:
    try:
        payload = AuthTokenData(**decode_jwt_token(token))
    except jwt.ExpiredSignatureError:
        raise Unauthenticated("Token has expired")
    except jwt.InvalidTokenError:
        raise Unauthenticated("Invalid token")
    if payload.token_type != "refresh_token":
        raise Unauthenticated("Invalid token type")
    user = await get_user(session, payload.user_id)
    if not user:
        raise Unauthenticated("User not found")
    access_token_data = AuthTokenData(user_id=user.id, token_type="access_token")
    access_token = create_access_token(
        data=access_token_data.model_dump(),
        expires_delta=timedelta(minutes=service.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return Token(access_token=access_token, refresh_token=token, token_type="Bearer")


@router.get("/me", response_model=AuthUser, summary="get current user info")
async def read_users_me(current_user: DependsAuth):
    return current_user
