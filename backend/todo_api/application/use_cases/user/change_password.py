"""
Change / Reset Password Use Cases
=================================
"""
import logging
import uuid

from todo_api.application.authorization import require_user_manager
from todo_api.application.dto.common import Actor
from todo_api.domain.errors import InvalidCredentials, UserNotFound, ValidationError
from todo_api.domain.models.user import User
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.domain.services.security import PasswordEncoder

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """Self-service password change; the current password must be presented."""

    def __init__(self, user_repository: UserRepository, password_encoder: PasswordEncoder):
        self._users = user_repository
        self._encoder = password_encoder

    async def execute(self, user_id: uuid.UUID, current_password: str, new_password: str) -> User:
        """
        Raises:
            UserNotFound: Account missing or deleted
            InvalidCredentials: Current password does not match
            ValidationError: New password is empty
        """
        user = await self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        if not user.has_password or not self._encoder.verify(current_password, user.password_hash):
            raise InvalidCredentials("Current password is incorrect")
        if not new_password:
            raise ValidationError("New password is required", field="newPassword")

        user.change_password(self._encoder.hash(new_password), str(user_id))
        user = await self._users.save(user)
        logger.info("[users] password changed id=%s", user.id)
        return user


class ResetPasswordUseCase:
    """Administrative password reset; no knowledge of the old password needed."""

    def __init__(self, user_repository: UserRepository, password_encoder: PasswordEncoder):
        self._users = user_repository
        self._encoder = password_encoder

    async def execute(self, actor: Actor, user_id: uuid.UUID, new_password: str) -> User:
        require_user_manager(actor)
        if not new_password:
            raise ValidationError("New password is required", field="newPassword")

        user = await self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()

        user.change_password(self._encoder.hash(new_password), actor.audit_name)
        user = await self._users.save(user)
        logger.info("[users] password reset id=%s by=%s", user.id, actor.user_id)
        return user
