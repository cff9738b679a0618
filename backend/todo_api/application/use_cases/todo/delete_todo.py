"""
Delete Todo Use Case
====================

Logical delete by the owner. The row is kept with `deleted=True`.
"""
import logging
import uuid

from todo_api.domain.errors import TodoNotFound
from todo_api.domain.models.todo import Todo
from todo_api.domain.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class DeleteTodoUseCase:
    def __init__(self, todo_repository: TodoRepository):
        self._todos = todo_repository

    async def execute(self, todo_id: uuid.UUID, user_id: uuid.UUID) -> Todo:
        """
        Raises:
            TodoNotFound: Not found, already deleted, or not owned by `user_id`
        """
        todo = await self._todos.find_by_id_and_user_id(todo_id, user_id)
        if todo is None:
            raise TodoNotFound()
        await self._todos.delete(todo, str(user_id))
        logger.info("[todos] deleted id=%s user=%s", todo.id, user_id)
        return todo
