"""
Complete / Incomplete Todo Use Cases
====================================

Both look the Todo up by ID *and* owner, so a Todo owned by someone else is
indistinguishable from a missing one.
"""
import logging
import uuid

from todo_api.domain.errors import TodoNotFound
from todo_api.domain.models.todo import Todo
from todo_api.domain.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class CompleteTodoUseCase:
    def __init__(self, todo_repository: TodoRepository):
        self._todos = todo_repository

    async def execute(self, todo_id: uuid.UUID, user_id: uuid.UUID) -> Todo:
        """
        Raises:
            TodoNotFound: Not found or not owned by `user_id`
            InvalidStateError: Already completed
        """
        todo = await self._todos.find_by_id_and_user_id(todo_id, user_id)
        if todo is None:
            raise TodoNotFound()
        todo.mark_as_completed(str(user_id))
        todo = await self._todos.save(todo)
        logger.info("[todos] completed id=%s user=%s", todo.id, user_id)
        return todo


class IncompleteTodoUseCase:
    def __init__(self, todo_repository: TodoRepository):
        self._todos = todo_repository

    async def execute(self, todo_id: uuid.UUID, user_id: uuid.UUID) -> Todo:
        """
        Raises:
            TodoNotFound: Not found or not owned by `user_id`
            InvalidStateError: Not completed yet
        """
        todo = await self._todos.find_by_id_and_user_id(todo_id, user_id)
        if todo is None:
            raise TodoNotFound()
        todo.mark_as_incomplete(str(user_id))
        todo = await self._todos.save(todo)
        logger.info("[todos] reopened id=%s user=%s", todo.id, user_id)
        return todo
