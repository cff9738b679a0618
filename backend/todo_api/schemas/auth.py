# todo_api/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for registration and login.
"""
from typing import Optional

from pydantic import BaseModel, Field

from .user import PASSWORD_MIN_LENGTH, ROLE_MAX, UserOut


class RegisterIn(BaseModel):
    """
    Request model for the public registration endpoint.
    Length limits are enforced by the domain model.
    """
    username: str  # Unique login name (1-50 characters)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)  # Plain text password (hashed server-side)
    firstName: Optional[str] = None
    firstNameRuby: Optional[str] = None
    lastName: Optional[str] = None
    lastNameRuby: Optional[str] = None
    role: Optional[int] = Field(default=None, ge=1, le=ROLE_MAX)  # Ordinary user role (3 or greater); defaults to 8


class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    username: str  # User login name
    password: str  # User password (plain text, verified server-side)


class AuthOut(BaseModel):
    """
    Payload returned by register and login.
    """
    token: str  # JWT access token for API authentication
    user: UserOut  # User information object
