"""
Login Use Case
==============
"""
import logging

from todo_api.application.dto.user_dto import AuthResult
from todo_api.domain.errors import InvalidCredentials
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.domain.services.security import PasswordEncoder, TokenIssuer

logger = logging.getLogger(__name__)


class LoginUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        password_encoder: PasswordEncoder,
        token_issuer: TokenIssuer,
    ):
        self._users = user_repository
        self._encoder = password_encoder
        self._tokens = token_issuer

    async def execute(self, username: str, password: str) -> AuthResult:
        """
        Verify credentials and issue a token.

        Raises:
            InvalidCredentials: Unknown username, no password set yet, or a
                wrong password (all reported identically)
        """
        user = await self._users.find_by_username(username)
        if user is None or not user.has_password or not self._encoder.verify(password, user.password_hash):
            logger.info("[auth] login failed username=%s", username)
            raise InvalidCredentials()

        token = self._tokens.issue(user.id, user.username, user.role)
        return AuthResult(token=token, user=user)
