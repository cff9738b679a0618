"""
Delete User Use Case
====================

Logical delete of an account. The user's Todos are logically deleted in the
same unit of work so nothing owned by a deleted account stays visible.
"""
import logging
import uuid

from todo_api.application.authorization import require_admin
from todo_api.application.dto.common import Actor
from todo_api.domain.errors import InvalidStateError, UserNotFound
from todo_api.domain.models.user import User, UserRole
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    def __init__(self, user_repository: UserRepository, todo_repository: TodoRepository):
        self._users = user_repository
        self._todos = todo_repository

    async def execute(self, actor: Actor, user_id: uuid.UUID) -> User:
        """
        Raises:
            AccessDenied: Actor is not an ADMIN
            UserNotFound: No such (non-deleted) user
            InvalidStateError: Deleting yourself or the last ADMIN
        """
        require_admin(actor)
        if actor.user_id == user_id:
            raise InvalidStateError("Cannot delete yourself")

        user = await self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        if user.is_admin and await self._users.count_by_role(UserRole.ADMIN) <= 1:
            raise InvalidStateError("Cannot delete the last admin")

        await self._users.delete(user, actor.audit_name)
        removed = await self._todos.delete_all_by_user_id(user.id, actor.audit_name)
        logger.info("[users] deleted id=%s todos=%d by=%s", user.id, removed, actor.user_id)
        return user
