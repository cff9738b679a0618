# todo_api/api/v1/deps.py
import uuid

from fastapi import Depends, Header, HTTPException, Request, status

from todo_api.application.dto.common import Actor
from todo_api.core.security import decode_access_token
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.domain.services.security import PasswordEncoder, TokenIssuer
from todo_api.infrastructure.db import TortoiseTodoRepository, TortoiseUserRepository
from todo_api.infrastructure.security import Argon2PasswordEncoder, JwtTokenIssuer

ACCESS_TOKEN_COOKIE = "accessToken"


def _unauthorized(code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"code": code, "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Actor:
    """
    FastAPI dependency resolving the authenticated caller from a JWT.

    The token is read from either:
    1. Authorization header (Bearer token) - preferred method
    2. HttpOnly cookie (accessToken) - fallback method

    The claims are trusted as-is: user id, username and role flow into the
    use cases as an explicit Actor, without a database lookup here.

    Returns:
        Actor: The authenticated caller

    Raises:
        HTTPException (401): If no token is provided (AUTH_REQUIRED)
        HTTPException (401): If token is invalid, expired or malformed (AUTH_INVALID_TOKEN)

    Usage:
        @router.get("/protected")
        async def protected_route(current: Actor = Depends(get_current_user)):
            return {"user_id": str(current.user_id)}
    """
    token = None
    # 1) Prioritize Authorization: Bearer xxx
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    # 2) Secondly HttpOnly Cookie: accessToken
    if not token:
        token = request.cookies.get(ACCESS_TOKEN_COOKIE)

    if not token:
        raise _unauthorized("AUTH_REQUIRED", "Authentication required")

    try:
        payload = decode_access_token(token)
        actor = Actor(
            user_id=uuid.UUID(payload["sub"]),
            role=int(payload["role"]),
            username=payload.get("username", ""),
        )
    except Exception:
        raise _unauthorized("AUTH_INVALID_TOKEN", "Invalid or expired token")
    return actor


# ----- adapters -----
def get_todo_repository() -> TodoRepository:
    return TortoiseTodoRepository()


def get_user_repository() -> UserRepository:
    return TortoiseUserRepository()


def get_password_encoder() -> PasswordEncoder:
    return Argon2PasswordEncoder()


def get_token_issuer() -> TokenIssuer:
    return JwtTokenIssuer()
