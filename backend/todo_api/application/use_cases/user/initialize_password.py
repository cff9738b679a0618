"""
Initialize Password Use Case
============================

One-time bootstrap of a password for an account created without one.
"""
import logging
import uuid
from typing import Optional

from todo_api.application.authorization import require_user_manager
from todo_api.application.dto.common import Actor
from todo_api.domain.errors import UserNotFound
from todo_api.domain.models.user import SYSTEM_ACTOR, User
from todo_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class InitializePasswordUseCase:
    def __init__(self, user_repository: UserRepository):
        self._users = user_repository

    async def execute(self, user_id: uuid.UUID, password_hash: str, actor: Optional[Actor] = None) -> User:
        """
        Args:
            user_id: Account to bootstrap
            password_hash: Already hashed password
            actor: Caller; when given it must hold ADMIN or MANAGER. Internal
                callers (startup bootstrap) pass None.

        Raises:
            AccessDenied: Actor lacks the user-management role
            UserNotFound: No such (non-deleted) user
            InvalidStateError: The user already has a password
        """
        if actor is not None:
            require_user_manager(actor)

        user = await self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()

        user.initialize_password(password_hash, actor.audit_name if actor else SYSTEM_ACTOR)
        user = await self._users.save(user)
        logger.info("[users] password initialized id=%s", user.id)
        return user
