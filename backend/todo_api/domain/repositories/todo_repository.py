"""
Todo Repository Interface
=========================

Abstract interface for Todo data access.
Implementations live in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from todo_api.domain.models.todo import SYSTEM_ACTOR, Todo


class TodoRepository(ABC):
    """
    Abstract repository for Todo persistence operations.

    Every finder skips logically deleted rows, except
    `find_all_by_user_id_including_deleted`.
    """

    @abstractmethod
    async def find_by_id(self, todo_id: uuid.UUID) -> Optional[Todo]:
        """
        Find a non-deleted Todo by its ID.

        Args:
            todo_id: Unique todo identifier

        Returns:
            Todo entity if found, None otherwise
        """

    @abstractmethod
    async def find_by_user_id(self, user_id: uuid.UUID) -> List[Todo]:
        """Find all non-deleted Todos owned by a user."""

    @abstractmethod
    async def find_by_id_and_user_id(
        self, todo_id: uuid.UUID, user_id: uuid.UUID
    ) -> Optional[Todo]:
        """
        Find a non-deleted Todo by ID, only if it belongs to `user_id`.

        A Todo owned by someone else is reported exactly like a missing one.
        """

    @abstractmethod
    async def find_all_by_user_id_including_deleted(self, user_id: uuid.UUID) -> List[Todo]:
        """Find every Todo owned by a user, logically deleted ones included."""

    @abstractmethod
    async def save(self, todo: Todo) -> Todo:
        """
        Insert or update a Todo.

        A Todo without an ID is inserted and receives one; otherwise the full
        record is written.

        Returns:
            The persisted Todo
        """

    @abstractmethod
    async def delete(self, todo: Todo, updated_by: str = SYSTEM_ACTOR) -> None:
        """
        Logically delete a Todo (sets the deleted flag) and persist it.

        Raises:
            InvalidStateError: The Todo is already deleted
        """

    @abstractmethod
    async def delete_by_id_and_user_id(self, todo_id: uuid.UUID, user_id: uuid.UUID) -> bool:
        """
        Logically delete a Todo owned by `user_id`.

        Returns:
            True if a matching non-deleted Todo was found and deleted
        """

    @abstractmethod
    async def delete_all_by_user_id(self, user_id: uuid.UUID, updated_by: str = SYSTEM_ACTOR) -> int:
        """
        Logically delete every remaining Todo owned by a user, stamping
        `updated_by` on each.

        Returns:
            Number of Todos marked deleted
        """
