"""
User Repository Interface
=========================

Abstract interface for user account data access.
Implementations live in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from todo_api.domain.models.user import SYSTEM_ACTOR, User


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.
    Finders never return logically deleted users.
    """

    @abstractmethod
    async def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """
        Find a non-deleted user by ID.

        Args:
            user_id: Unique user identifier

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a non-deleted user by exact username."""

    @abstractmethod
    async def exists_by_username(self, username: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """
        Check whether a non-deleted user already holds `username`.

        Args:
            username: Username to look up
            exclude_id: Ignore this user (used when renaming)
        """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert (no ID yet) or fully update a user."""

    @abstractmethod
    async def delete(self, user: User, updated_by: str = SYSTEM_ACTOR) -> None:
        """Logically delete a user and persist it."""

    @abstractmethod
    async def find_all(
        self, query: Optional[str] = None, offset: int = 0, limit: Optional[int] = None
    ) -> List[User]:
        """
        List non-deleted users, newest first.

        Args:
            query: Optional case-insensitive username substring
            offset: Number of rows to skip
            limit: Maximum number of rows (None for all)
        """

    @abstractmethod
    async def count(self, query: Optional[str] = None) -> int:
        """Count non-deleted users matching the optional username substring."""

    @abstractmethod
    async def count_by_role(self, role: int) -> int:
        """Count non-deleted users holding exactly `role`."""
