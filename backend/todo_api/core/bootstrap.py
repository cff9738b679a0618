# todo_api/core/bootstrap.py
"""
Bootstrap module for application initialization.
Handles initial setup tasks such as creating the default admin on first startup.
"""
import logging

from todo_api.application.use_cases.user import InitializePasswordUseCase
from todo_api.config import settings
from todo_api.domain.models.user import User, UserRole
from todo_api.infrastructure.db import TortoiseUserRepository, transactional
from todo_api.infrastructure.security import Argon2PasswordEncoder

logger = logging.getLogger("uvicorn.error")


async def ensure_default_admin() -> None:
    """
    If no admin exists in the database, create a default admin based on environment variables.
    Only takes effect under the following conditions:
      - Currently no non-deleted user with role=ADMIN
      - And ADMIN_PASSWORD is set (to avoid using default weak password)
    Environment variables:
      ADMIN_USERNAME (default: "admin")
      ADMIN_PASSWORD (required, otherwise won't create)
    """
    users = TortoiseUserRepository()
    async with transactional():
        if await users.count_by_role(UserRole.ADMIN) > 0:
            return

        if not settings.admin_password:
            logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
            return

        # If username is already taken, create a non-conflicting name
        admin_username = settings.admin_username
        suffix = 1
        while await users.exists_by_username(admin_username):
            suffix += 1
            admin_username = f"{settings.admin_username}{suffix}"

        admin = await users.save(User.create(username=admin_username, role=UserRole.ADMIN))
        admin = await InitializePasswordUseCase(users).execute(
            admin.id, Argon2PasswordEncoder().hash(settings.admin_password)
        )
    logger.warning("[bootstrap] Created default admin -> username=%s id=%s", admin.username, admin.id)
