# todo_api/schemas/user.py
"""
Pydantic schemas for user endpoints.
Defines request models for self-service and administrative user management
and the serializer for user payloads.
"""
from typing import Optional

from pydantic import BaseModel, Field

from todo_api.domain.models.user import User, role_name
from todo_api.utils.datetime_utils import to_iso

PASSWORD_MIN_LENGTH = 6
ROLE_MAX = 2**31 - 1  # PostgreSQL INTEGER column


class UserOut(BaseModel):
    """
    User information returned by the API.
    The password hash is never part of this model.
    """
    id: str  # User unique identifier
    username: str  # User login name
    firstName: Optional[str] = None
    firstNameRuby: Optional[str] = None
    lastName: Optional[str] = None
    lastNameRuby: Optional[str] = None
    role: int  # 1=ADMIN, 2=MANAGER, 3+=USER
    roleName: str  # "ADMIN" | "MANAGER" | "USER"
    createdAt: Optional[str] = None  # ISO 8601
    updatedAt: Optional[str] = None  # ISO 8601


class ProfileUpdateIn(BaseModel):
    """
    Self-service profile update. Only provided fields are changed.
    """
    firstName: Optional[str] = None
    firstNameRuby: Optional[str] = None
    lastName: Optional[str] = None
    lastNameRuby: Optional[str] = None


class UserCreateIn(BaseModel):
    """
    Administrative user creation. Without a password the account cannot log
    in until its password is initialized.
    """
    username: str
    password: Optional[str] = Field(default=None, min_length=PASSWORD_MIN_LENGTH)
    firstName: Optional[str] = None
    firstNameRuby: Optional[str] = None
    lastName: Optional[str] = None
    lastNameRuby: Optional[str] = None
    role: Optional[int] = Field(default=None, ge=1, le=ROLE_MAX)


class UserUpdateIn(ProfileUpdateIn):
    """
    Administrative user update. All fields are optional - only provided
    fields will be updated.
    """
    username: Optional[str] = None
    role: Optional[int] = Field(default=None, ge=1, le=ROLE_MAX)  # Requires ADMIN; cannot demote the last admin


class ChangePasswordIn(BaseModel):
    currentPassword: str
    newPassword: str = Field(min_length=PASSWORD_MIN_LENGTH)


class PasswordIn(BaseModel):
    """Body for admin-initiated initialize/reset password."""
    newPassword: str = Field(min_length=PASSWORD_MIN_LENGTH)  # New password (minimum 6 characters)


# Request field -> domain attribute
PROFILE_FIELDS = {
    "firstName": "first_name",
    "firstNameRuby": "first_name_ruby",
    "lastName": "last_name",
    "lastNameRuby": "last_name_ruby",
}


def user_to_dict(u: User) -> dict:
    """
    Convert a User entity to dictionary format for API responses.

    Args:
        u: User entity

    Returns:
        dict: camelCase user fields (password hash excluded)
    """
    return {
        "id": str(u.id),
        "username": u.username,
        "firstName": u.first_name,
        "firstNameRuby": u.first_name_ruby,
        "lastName": u.last_name,
        "lastNameRuby": u.last_name_ruby,
        "role": int(u.role),
        "roleName": role_name(u.role),
        "createdAt": to_iso(u.created_at),
        "updatedAt": to_iso(u.updated_at),
    }
