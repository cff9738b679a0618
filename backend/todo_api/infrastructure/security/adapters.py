"""
Security adapters over todo_api.core.security.
"""
import uuid

from todo_api.core.security import create_access_token, hash_password, verify_password
from todo_api.domain.services.security import PasswordEncoder, TokenIssuer


class Argon2PasswordEncoder(PasswordEncoder):
    """passlib/argon2 implementation of PasswordEncoder."""

    def hash(self, plain: str) -> str:
        return hash_password(plain)

    def verify(self, plain: str, hashed: str) -> bool:
        return verify_password(plain, hashed)


class JwtTokenIssuer(TokenIssuer):
    """PyJWT implementation of TokenIssuer."""

    def issue(self, user_id: uuid.UUID, username: str, role: int) -> str:
        return create_access_token(str(user_id), username, int(role))
