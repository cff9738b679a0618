"""
User and auth use case inputs/outputs.
"""
from dataclasses import dataclass
from typing import Any

from todo_api.domain.models.user import User

from .common import UNSET


@dataclass
class AuthResult:
    token: str
    user: User


@dataclass
class ProfileChanges:
    """Self-service profile patch. UNSET fields keep their current value."""
    first_name: Any = UNSET
    first_name_ruby: Any = UNSET
    last_name: Any = UNSET
    last_name_ruby: Any = UNSET


@dataclass
class UserChanges(ProfileChanges):
    """Administrative patch: profile fields plus username and role."""
    username: Any = UNSET
    role: Any = UNSET
