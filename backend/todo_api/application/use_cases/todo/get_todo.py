"""
Get Todo Use Case
=================
"""
import uuid

from todo_api.domain.errors import AccessDenied, TodoNotFound
from todo_api.domain.models.todo import Todo
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.services.todo_service import is_owner


class GetTodoUseCase:
    """Load one Todo for its owner."""

    def __init__(self, todo_repository: TodoRepository):
        self._todos = todo_repository

    async def execute(self, todo_id: uuid.UUID, user_id: uuid.UUID) -> Todo:
        """
        Raises:
            TodoNotFound: No such Todo, or it is logically deleted
            AccessDenied: The Todo belongs to another user
        """
        todo = await self._todos.find_by_id(todo_id)
        if todo is None:
            raise TodoNotFound()
        if not is_owner(todo, user_id):
            raise AccessDenied("You do not have access to this todo")
        return todo
