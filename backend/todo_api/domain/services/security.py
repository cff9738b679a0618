"""
Security collaborators the use cases depend on.
Hashing and token issuing are infrastructure concerns; the domain only
knows these contracts.
"""
import uuid
from abc import ABC, abstractmethod


class PasswordEncoder(ABC):
    """Hashes and verifies plain-text passwords."""

    @abstractmethod
    def hash(self, plain: str) -> str:
        ...

    @abstractmethod
    def verify(self, plain: str, hashed: str) -> bool:
        ...


class TokenIssuer(ABC):
    """Issues bearer tokens for an authenticated user."""

    @abstractmethod
    def issue(self, user_id: uuid.UUID, username: str, role: int) -> str:
        ...
