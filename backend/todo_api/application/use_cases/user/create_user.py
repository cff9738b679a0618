"""
Create User Use Case
====================

Administrative account creation. The password is optional: an account
created without one stays unable to log in until its password is
initialized.
"""
import logging
from typing import Optional

from todo_api.application.authorization import require_admin, require_user_manager
from todo_api.application.dto.common import Actor
from todo_api.domain.errors import DuplicateUsername
from todo_api.domain.models.user import User, UserRole
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.domain.services.security import PasswordEncoder

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    def __init__(self, user_repository: UserRepository, password_encoder: PasswordEncoder):
        self._users = user_repository
        self._encoder = password_encoder

    async def execute(
        self,
        actor: Actor,
        username: str,
        password: Optional[str] = None,
        first_name: Optional[str] = None,
        first_name_ruby: Optional[str] = None,
        last_name: Optional[str] = None,
        last_name_ruby: Optional[str] = None,
        role: Optional[int] = None,
    ) -> User:
        """
        Raises:
            AccessDenied: Actor is not ADMIN/MANAGER, or a MANAGER tries to
                create a privileged account
            ValidationError: Invalid field
            DuplicateUsername: Username already taken
        """
        require_user_manager(actor)
        if role is not None and role < UserRole.USER:
            require_admin(actor)

        user = User.create(
            username=username,
            first_name=first_name,
            first_name_ruby=first_name_ruby,
            last_name=last_name,
            last_name_ruby=last_name_ruby,
            role=role,
            created_by=actor.audit_name,
        )
        if await self._users.exists_by_username(username):
            raise DuplicateUsername()
        if password:
            user.initialize_password(self._encoder.hash(password), actor.audit_name)

        user = await self._users.save(user)
        logger.info("[users] created id=%s username=%s by=%s", user.id, user.username, actor.user_id)
        return user
