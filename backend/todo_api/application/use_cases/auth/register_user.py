"""
Register User Use Case
======================

Public self-registration: create the account, hash and store the password,
issue a token.
"""
import logging
from typing import Optional

from todo_api.application.dto.user_dto import AuthResult
from todo_api.domain.errors import DuplicateUsername, ValidationError
from todo_api.domain.models.user import User, UserRole
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.domain.services.security import PasswordEncoder, TokenIssuer

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Use case for registering a new user account.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_encoder: PasswordEncoder,
        token_issuer: TokenIssuer,
    ):
        self._users = user_repository
        self._encoder = password_encoder
        self._tokens = token_issuer

    async def execute(
        self,
        username: str,
        password: str,
        first_name: Optional[str] = None,
        first_name_ruby: Optional[str] = None,
        last_name: Optional[str] = None,
        last_name_ruby: Optional[str] = None,
        role: Optional[int] = None,
    ) -> AuthResult:
        """
        Execute the register user use case.

        Args:
            username: Unique login name (1-50 characters)
            password: Plain-text password, hashed before it reaches the entity
            role: Optional ordinary-user role (3 or greater); defaults to 8

        Returns:
            AuthResult with the issued token and the stored user

        Raises:
            ValidationError: Missing password, invalid profile fields, or a
                privileged role requested
            DuplicateUsername: Username already taken
        """
        if not password:
            raise ValidationError("Password is required", field="password")
        if role is not None and role < UserRole.USER:
            raise ValidationError("Privileged roles cannot be self-assigned", field="role")

        user = User.create(
            username=username,
            first_name=first_name,
            first_name_ruby=first_name_ruby,
            last_name=last_name,
            last_name_ruby=last_name_ruby,
            role=role,
        )
        if await self._users.exists_by_username(username):
            raise DuplicateUsername()

        user.initialize_password(self._encoder.hash(password))
        user = await self._users.save(user)
        logger.info("[auth] registered user id=%s username=%s", user.id, user.username)

        token = self._tokens.issue(user.id, user.username, user.role)
        return AuthResult(token=token, user=user)
