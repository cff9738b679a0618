"""
Get User Use Case
=================
"""
import uuid

from todo_api.application.authorization import require_user_manager
from todo_api.application.dto.common import Actor
from todo_api.domain.errors import UserNotFound
from todo_api.domain.models.user import User
from todo_api.domain.repositories.user_repository import UserRepository


class GetUserUseCase:
    """Anyone may read their own account; other accounts need ADMIN or MANAGER."""

    def __init__(self, user_repository: UserRepository):
        self._users = user_repository

    async def execute(self, actor: Actor, user_id: uuid.UUID) -> User:
        if actor.user_id != user_id:
            require_user_manager(actor)
        user = await self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return user
