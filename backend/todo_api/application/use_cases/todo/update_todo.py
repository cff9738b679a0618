"""
Update Todo Use Case
====================

Partial update: only the fields present in `TodoChanges` are applied, each
through the matching entity mutator.
"""
import logging
import uuid

from todo_api.application.dto.common import is_set
from todo_api.application.dto.todo_dto import TodoChanges
from todo_api.domain.errors import AccessDenied, TodoNotFound, ValidationError
from todo_api.domain.models.todo import Todo
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.services.todo_service import is_owner

logger = logging.getLogger(__name__)


class UpdateTodoUseCase:
    """
    Use case for editing a Todo's title, descriptions and completion state.
    """

    def __init__(self, todo_repository: TodoRepository):
        self._todos = todo_repository

    async def execute(self, todo_id: uuid.UUID, user_id: uuid.UUID, changes: TodoChanges) -> Todo:
        """
        Execute the update todo use case.

        `completed` only triggers a transition when it differs from the
        current state, so resending the current value is harmless.

        Raises:
            TodoNotFound: No such (non-deleted) Todo
            AccessDenied: The Todo belongs to another user
            ValidationError: A supplied field violates its constraint
        """
        todo = await self._todos.find_by_id(todo_id)
        if todo is None:
            raise TodoNotFound()
        if not is_owner(todo, user_id):
            raise AccessDenied("You do not have access to this todo")

        self._apply(todo, changes, str(user_id))

        todo = await self._todos.save(todo)
        logger.info("[todos] updated id=%s user=%s", todo.id, user_id)
        return todo

    @staticmethod
    def _apply(todo: Todo, changes: TodoChanges, actor: str) -> None:
        if is_set(changes.title):
            todo.update_title(changes.title, actor)
        if is_set(changes.descriptions):
            todo.update_descriptions(changes.descriptions, actor)
        if is_set(changes.completed) and changes.completed is not None:
            if not isinstance(changes.completed, bool):
                raise ValidationError("completed must be a boolean", field="completed")
            if changes.completed and not todo.completed:
                todo.mark_as_completed(actor)
            elif not changes.completed and todo.completed:
                todo.mark_as_incomplete(actor)
