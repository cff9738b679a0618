# todo_api/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, Response

from todo_api.api.v1.deps import (
    ACCESS_TOKEN_COOKIE,
    get_password_encoder,
    get_token_issuer,
    get_user_repository,
)
from todo_api.application.use_cases.auth import LoginUseCase, RegisterUserUseCase
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.domain.services.security import PasswordEncoder, TokenIssuer
from todo_api.infrastructure.db import transactional
from todo_api.schemas.auth import AuthOut, LoginRequest, RegisterIn
from todo_api.schemas.common import ApiResponse, ok
from todo_api.schemas.user import user_to_dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse[AuthOut])
async def register(
    body: RegisterIn,
    users: UserRepository = Depends(get_user_repository),
    encoder: PasswordEncoder = Depends(get_password_encoder),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    """
    Register a new user account.

    Creates a new user with the provided username, password and optional
    profile fields. The password is hashed before storage and a token is
    issued right away.

    Args:
        body: Request body containing:
            - username: str (must be unique among active users)
            - password: str (will be hashed before storage)
            - firstName/firstNameRuby/lastName/lastNameRuby: optional, <= 50 chars
            - role: optional ordinary-user role (defaults to 8)

    Returns:
        dict: Envelope whose data holds token and user

    Errors:
        - 400 VALIDATION_ERROR: Missing/invalid field
        - 400 USERNAME_EXISTS: Username already taken
    """
    async with transactional():
        result = await RegisterUserUseCase(users, encoder, tokens).execute(
            username=body.username,
            password=body.password,
            first_name=body.firstName,
            first_name_ruby=body.firstNameRuby,
            last_name=body.lastName,
            last_name_ruby=body.lastNameRuby,
            role=body.role,
        )
    return ok({"token": result.token, "user": user_to_dict(result.user)}, "User registered")


@router.post("/login", response_model=ApiResponse[AuthOut])
async def login(
    payload: LoginRequest,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
    encoder: PasswordEncoder = Depends(get_password_encoder),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    """
    Authenticate user and create access token.

    The token is returned in the response body and also set as an HttpOnly
    cookie for browser-based clients.

    Errors:
        - 401 AUTH_INVALID_CREDENTIALS: Unknown username or wrong password
    """
    async with transactional():
        result = await LoginUseCase(users, encoder, tokens).execute(payload.username, payload.password)
    response.set_cookie(ACCESS_TOKEN_COOKIE, result.token, httponly=True, secure=False, samesite="lax")
    return ok({"token": result.token, "user": user_to_dict(result.user)}, "Login successful")


@router.post("/logout", response_model=ApiResponse[None])
async def logout(response: Response):
    """
    Log out the current user by clearing the access token cookie.

    Note:
        This endpoint only clears the cookie. The JWT token itself remains
        valid until it expires.
    """
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    return ok(None, "Logged out")
