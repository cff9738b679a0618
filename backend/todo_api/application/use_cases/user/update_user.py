"""
Update User Use Case
====================

Administrative partial update of another account: username, name fields and
role. Only supplied fields change.
"""
import logging
import uuid

from todo_api.application.authorization import require_admin, require_user_manager
from todo_api.application.dto.common import Actor, is_set
from todo_api.application.dto.user_dto import UserChanges
from todo_api.domain.errors import AccessDenied, DuplicateUsername, InvalidStateError, UserNotFound
from todo_api.domain.models.user import User, UserRole
from todo_api.domain.repositories.user_repository import UserRepository

from .update_profile import merge_profile

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Rules:
      - ADMIN or MANAGER may edit accounts; a MANAGER may not edit an ADMIN
      - only an ADMIN may change roles
      - nobody changes their own role
      - the last ADMIN cannot be demoted
    """

    def __init__(self, user_repository: UserRepository):
        self._users = user_repository

    async def execute(self, actor: Actor, user_id: uuid.UUID, changes: UserChanges) -> User:
        require_user_manager(actor)

        user = await self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        if user.is_admin and not actor.is_admin:
            raise AccessDenied("Administrator role required to edit an administrator")

        if is_set(changes.username) and changes.username != user.username:
            if await self._users.exists_by_username(changes.username, exclude_id=user.id):
                raise DuplicateUsername()
            user.rename(changes.username, actor.audit_name)

        merge_profile(user, changes, actor.audit_name)

        if is_set(changes.role) and changes.role is not None and changes.role != user.role:
            await self._change_role(actor, user, changes.role)

        user = await self._users.save(user)
        logger.info("[users] updated id=%s by=%s", user.id, actor.user_id)
        return user

    async def _change_role(self, actor: Actor, user: User, role: int) -> None:
        require_admin(actor)
        if actor.user_id == user.id:
            raise InvalidStateError("Cannot change your own role")
        if user.is_admin and role != UserRole.ADMIN:
            if await self._users.count_by_role(UserRole.ADMIN) <= 1:
                raise InvalidStateError("Cannot demote the last admin")
        user.change_role(role, actor.audit_name)
