"""
List Users Use Case
===================
"""
from typing import Optional

from todo_api.application.authorization import require_user_manager
from todo_api.application.dto.common import Actor, Page
from todo_api.application.dto.todo_dto import DEFAULT_PER_PAGE, MAX_PER_PAGE
from todo_api.domain.errors import ValidationError
from todo_api.domain.models.user import User
from todo_api.domain.repositories.user_repository import UserRepository


class ListUsersUseCase:
    def __init__(self, user_repository: UserRepository):
        self._users = user_repository

    async def execute(
        self,
        actor: Actor,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
        query: Optional[str] = None,
    ) -> Page[User]:
        """
        Paginated list of non-deleted users, newest first.

        Args:
            actor: Must hold ADMIN or MANAGER
            query: Optional case-insensitive username substring
        """
        require_user_manager(actor)
        if page < 1:
            raise ValidationError("page must be 1 or greater", field="page")
        if not 1 <= per_page <= MAX_PER_PAGE:
            raise ValidationError(f"perPage must be between 1 and {MAX_PER_PAGE}", field="perPage")

        query = query or None
        total = await self._users.count(query)
        items = await self._users.find_all(query, offset=(page - 1) * per_page, limit=per_page)
        return Page(items=items, total=total, page=page, per_page=per_page)
