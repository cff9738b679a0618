"""
List Todos Use Cases
====================

Filtering, sorting and pagination happen in memory over the owner's Todos.
"""
import uuid
from typing import Optional

from todo_api.application.dto.common import Page
from todo_api.application.dto.todo_dto import DEFAULT_PER_PAGE, ListTodosQuery
from todo_api.domain.models.todo import Todo
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.services.todo_service import apply_completed_filter, paginate, sort_todos


class ListTodosUseCase:
    """
    Paginated list of a user's non-deleted Todos.
    """

    def __init__(self, todo_repository: TodoRepository):
        self._todos = todo_repository

    async def execute(self, user_id: uuid.UUID, query: Optional[ListTodosQuery] = None) -> Page[Todo]:
        """
        Args:
            user_id: Owner whose Todos are listed
            query: Filter, sort and pagination options (defaults apply when None)

        Returns:
            Page with the requested slice, total count and total pages

        Raises:
            ValidationError: An option is out of range
        """
        query = query or ListTodosQuery()
        query.validate()

        todos = await self._todos.find_by_user_id(user_id)
        todos = apply_completed_filter(todos, query.completed_filter)
        todos = sort_todos(todos, query.sort_by, query.sort_order)
        items, total = paginate(todos, query.page, query.per_page)
        return Page(items=items, total=total, page=query.page, per_page=query.per_page)


class ListDeletedTodosUseCase:
    """Trash view: the user's logically deleted Todos, most recently deleted first."""

    def __init__(self, todo_repository: TodoRepository):
        self._todos = todo_repository

    async def execute(self, user_id: uuid.UUID, page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Page[Todo]:
        ListTodosQuery(page=page, per_page=per_page).validate()
        todos = await self._todos.find_all_by_user_id_including_deleted(user_id)
        todos = sort_todos([t for t in todos if t.deleted], "updatedAt", "desc")
        items, total = paginate(todos, page, per_page)
        return Page(items=items, total=total, page=page, per_page=per_page)
