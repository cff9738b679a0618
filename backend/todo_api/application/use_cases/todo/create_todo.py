"""
Create Todo Use Case
====================

Creates a Todo for an existing, non-deleted user.
"""
import logging
import uuid
from typing import Optional

from todo_api.domain.errors import UserNotFound
from todo_api.domain.models.todo import Todo
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CreateTodoUseCase:
    """
    Use case for creating a Todo owned by the requesting user.
    """

    def __init__(self, todo_repository: TodoRepository, user_repository: UserRepository):
        self._todos = todo_repository
        self._users = user_repository

    async def execute(
        self,
        title: str,
        descriptions: Optional[str],
        user_id: uuid.UUID,
        completed: bool = False,
    ) -> Todo:
        """
        Execute the create todo use case.

        Args:
            title: 1-32 characters
            descriptions: Optional, at most 128 characters
            user_id: Owner (the authenticated user)
            completed: Create the Todo already completed

        Returns:
            The persisted Todo

        Raises:
            UserNotFound: Owner does not exist or is deleted
            ValidationError: Title or descriptions violate their length limits
        """
        owner = await self._users.find_by_id(user_id)
        if owner is None:
            raise UserNotFound()

        actor = str(user_id)
        todo = Todo.create(title, descriptions, user_id, created_by=actor)
        if completed:
            todo.mark_as_completed(actor)

        todo = await self._todos.save(todo)
        logger.info("[todos] created id=%s user=%s", todo.id, user_id)
        return todo
