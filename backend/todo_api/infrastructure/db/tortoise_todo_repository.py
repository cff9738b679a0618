"""
Tortoise Todo Repository
========================

Concrete implementation of TodoRepository using Tortoise ORM.
"""
import uuid
from typing import List, Optional

from todo_api.domain.models.todo import SYSTEM_ACTOR, Todo
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.models.todo import TodoModel
from todo_api.utils.datetime_utils import utc_now


class TortoiseTodoRepository(TodoRepository):
    """
    Tortoise ORM implementation of TodoRepository.

    Each call returns fresh entity copies; entities are never cached.
    """

    @staticmethod
    def _to_entity(row: TodoModel) -> Todo:
        """Convert a database row to a Todo entity."""
        return Todo(
            id=row.id,
            title=row.title,
            descriptions=row.descriptions,
            completed=row.completed,
            user_id=row.user_id,
            created_at=row.created_at,
            created_by=row.created_by,
            updated_at=row.updated_at,
            updated_by=row.updated_by,
            deleted=row.deleted,
        )

    @staticmethod
    def _to_fields(todo: Todo) -> dict:
        """Convert a Todo entity to column values (ID excluded)."""
        return {
            "title": todo.title,
            "descriptions": todo.descriptions,
            "completed": todo.completed,
            "user_id": todo.user_id,
            "created_at": todo.created_at,
            "created_by": todo.created_by,
            "updated_at": todo.updated_at,
            "updated_by": todo.updated_by,
            "deleted": todo.deleted,
        }

    async def find_by_id(self, todo_id: uuid.UUID) -> Optional[Todo]:
        row = await TodoModel.get_or_none(id=todo_id, deleted=False)
        return self._to_entity(row) if row else None

    async def find_by_user_id(self, user_id: uuid.UUID) -> List[Todo]:
        rows = await TodoModel.filter(user_id=user_id, deleted=False).order_by("created_at")
        return [self._to_entity(r) for r in rows]

    async def find_by_id_and_user_id(
        self, todo_id: uuid.UUID, user_id: uuid.UUID
    ) -> Optional[Todo]:
        row = await TodoModel.get_or_none(id=todo_id, user_id=user_id, deleted=False)
        return self._to_entity(row) if row else None

    async def find_all_by_user_id_including_deleted(self, user_id: uuid.UUID) -> List[Todo]:
        rows = await TodoModel.filter(user_id=user_id).order_by("created_at")
        return [self._to_entity(r) for r in rows]

    async def save(self, todo: Todo) -> Todo:
        """Insert when the entity has no ID yet, otherwise overwrite the full row."""
        fields = self._to_fields(todo)
        if todo.id is None:
            row = await TodoModel.create(**fields)
            todo.id = row.id
            return todo

        # user_id is immutable
        changes = {k: v for k, v in fields.items() if k != "user_id"}
        updated = await TodoModel.filter(id=todo.id).update(**changes)
        if not updated:
            await TodoModel.create(id=todo.id, **fields)
        return todo

    async def delete(self, todo: Todo, updated_by: str = SYSTEM_ACTOR) -> None:
        todo.delete(updated_by)
        await self.save(todo)

    async def delete_by_id_and_user_id(self, todo_id: uuid.UUID, user_id: uuid.UUID) -> bool:
        updated = await TodoModel.filter(id=todo_id, user_id=user_id, deleted=False).update(
            deleted=True, updated_at=utc_now(), updated_by=str(user_id)
        )
        return updated > 0

    async def delete_all_by_user_id(self, user_id: uuid.UUID, updated_by: str = SYSTEM_ACTOR) -> int:
        return await TodoModel.filter(user_id=user_id, deleted=False).update(
            deleted=True, updated_at=utc_now(), updated_by=updated_by
        )
