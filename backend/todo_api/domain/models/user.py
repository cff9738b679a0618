"""
User Model
==========

Domain model representing a user account.
This is a pure domain object with no infrastructure dependencies; the
password arrives here already hashed.
"""
import datetime as dt
import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from todo_api.domain.errors import InvalidStateError, ValidationError
from todo_api.utils.datetime_utils import utc_now

USERNAME_MAX_LENGTH = 50
NAME_MAX_LENGTH = 50
SYSTEM_ACTOR = "system"


class UserRole(IntEnum):
    """
    Integer role levels. Lower is more privileged.
    Any value of 3 or greater is an ordinary user.
    """
    ADMIN = 1
    MANAGER = 2
    USER = 3


# Column default for new accounts; any value >= UserRole.USER is an ordinary user
DEFAULT_ROLE = 8


def role_name(role: int) -> str:
    if role == UserRole.ADMIN:
        return "ADMIN"
    if role == UserRole.MANAGER:
        return "MANAGER"
    return "USER"


def validate_username(username: Optional[str]) -> None:
    if username is None or not username.strip():
        raise ValidationError("Username is required", field="username")
    if len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(
            f"Username must be at most {USERNAME_MAX_LENGTH} characters", field="username"
        )


def validate_name(value: Optional[str], field_name: str) -> None:
    if value is not None and len(value) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"{field_name} must be at most {NAME_MAX_LENGTH} characters", field=field_name
        )


def validate_role(role: Optional[int]) -> None:
    if role is None or isinstance(role, bool) or not isinstance(role, int) or role < UserRole.ADMIN:
        raise ValidationError("Role must be an integer of 1 or greater", field="role")


def validate_password_hash(password_hash: Optional[str]) -> None:
    if password_hash is None or not password_hash.strip():
        raise ValidationError("Password hash is required", field="passwordHash")


@dataclass
class User:
    """
    User domain model.

    The password hash is set exactly once through `initialize_password`
    (registration or admin bootstrap) and replaced afterwards only through
    `change_password`.
    """
    username: str
    first_name: Optional[str] = None
    first_name_ruby: Optional[str] = None
    last_name: Optional[str] = None
    last_name_ruby: Optional[str] = None
    role: int = DEFAULT_ROLE
    password_hash: Optional[str] = field(default=None, repr=False)
    id: Optional[uuid.UUID] = None
    created_at: dt.datetime = field(default_factory=utc_now)
    created_by: str = SYSTEM_ACTOR
    updated_at: dt.datetime = field(default_factory=utc_now)
    updated_by: str = SYSTEM_ACTOR
    deleted: bool = False

    @classmethod
    def create(
        cls,
        username: str,
        first_name: Optional[str] = None,
        first_name_ruby: Optional[str] = None,
        last_name: Optional[str] = None,
        last_name_ruby: Optional[str] = None,
        role: Optional[int] = None,
        created_by: str = SYSTEM_ACTOR,
    ) -> "User":
        """
        Factory for a new account without a password.

        Raises:
            ValidationError: username blank or too long, a name field longer
                than 50 characters, or an invalid role
        """
        role = DEFAULT_ROLE if role is None else role
        validate_username(username)
        validate_name(first_name, "firstName")
        validate_name(first_name_ruby, "firstNameRuby")
        validate_name(last_name, "lastName")
        validate_name(last_name_ruby, "lastNameRuby")
        validate_role(role)
        now = utc_now()
        return cls(
            username=username,
            first_name=first_name,
            first_name_ruby=first_name_ruby,
            last_name=last_name,
            last_name_ruby=last_name_ruby,
            role=role,
            created_at=now,
            created_by=created_by,
            updated_at=now,
            updated_by=created_by,
        )

    # ----- state transitions -----
    def _touch(self, updated_by: str) -> None:
        self.updated_at = utc_now()
        self.updated_by = updated_by

    def _ensure_not_deleted(self, action: str) -> None:
        if self.deleted:
            raise InvalidStateError(f"Deleted user cannot {action}")

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash)

    def initialize_password(self, password_hash: str, updated_by: str = SYSTEM_ACTOR) -> None:
        """One-time bootstrap of the password hash."""
        self._ensure_not_deleted("initialize a password")
        if self.has_password:
            raise InvalidStateError("Password is already initialized")
        validate_password_hash(password_hash)
        self.password_hash = password_hash
        self._touch(updated_by)

    def change_password(self, password_hash: str, updated_by: str = SYSTEM_ACTOR) -> None:
        self._ensure_not_deleted("change password")
        validate_password_hash(password_hash)
        self.password_hash = password_hash
        self._touch(updated_by)

    def update_profile(
        self,
        first_name: Optional[str],
        first_name_ruby: Optional[str],
        last_name: Optional[str],
        last_name_ruby: Optional[str],
        updated_by: str = SYSTEM_ACTOR,
    ) -> None:
        self._ensure_not_deleted("be updated")
        validate_name(first_name, "firstName")
        validate_name(first_name_ruby, "firstNameRuby")
        validate_name(last_name, "lastName")
        validate_name(last_name_ruby, "lastNameRuby")
        self.first_name = first_name
        self.first_name_ruby = first_name_ruby
        self.last_name = last_name
        self.last_name_ruby = last_name_ruby
        self._touch(updated_by)

    def rename(self, username: str, updated_by: str = SYSTEM_ACTOR) -> None:
        self._ensure_not_deleted("be renamed")
        validate_username(username)
        self.username = username
        self._touch(updated_by)

    def change_role(self, role: int, updated_by: str = SYSTEM_ACTOR) -> None:
        self._ensure_not_deleted("change role")
        validate_role(role)
        self.role = role
        self._touch(updated_by)

    def delete(self, updated_by: str = SYSTEM_ACTOR) -> None:
        """Logical delete."""
        if self.deleted:
            raise InvalidStateError("User is already deleted")
        self.deleted = True
        self._touch(updated_by)

    # ----- role predicates -----
    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_manager(self) -> bool:
        return self.role == UserRole.MANAGER

    @property
    def can_manage_users(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.MANAGER)
