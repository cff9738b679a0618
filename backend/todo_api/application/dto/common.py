"""
Shared application DTOs.
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar

from todo_api.domain.models.user import UserRole
from todo_api.domain.services.todo_service import total_pages

T = TypeVar("T")


class _Unset:
    """Marker for a partial-update field the caller did not supply."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def is_set(value: Any) -> bool:
    return value is not UNSET


@dataclass(frozen=True)
class Actor:
    """
    The authenticated caller, as resolved by the transport layer.
    Passed explicitly into every use case that needs to know who is asking.
    """
    user_id: uuid.UUID
    role: int
    username: str = ""

    @property
    def audit_name(self) -> str:
        return str(self.user_id)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def can_manage_users(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.MANAGER)


@dataclass
class Page(Generic[T]):
    """One page of results plus the totals a client needs to paginate."""
    items: List[T]
    total: int
    page: int
    per_page: int
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_pages = total_pages(self.total, self.per_page)
