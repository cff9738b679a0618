# todo_api/domain/errors.py
"""
Domain error taxonomy.
Use cases raise these typed failures; the HTTP layer maps each one to exactly
one status code (see todo_api.api.errors).
"""


class DomainError(Exception):
    """
    Base class for all failures raised by the domain and application layers.

    Attributes:
        code: Stable machine-readable error code returned to clients
        message: Human readable message (safe to show to end users)
    """
    code = "DOMAIN_ERROR"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message()
        super().__init__(self.message)

    @classmethod
    def default_message(cls) -> str:
        return "Request could not be processed"


class ValidationError(DomainError):
    """Input violates a field constraint (length, required)."""
    code = "VALIDATION_ERROR"

    def __init__(self, message: str | None = None, field: str | None = None):
        self.field = field
        super().__init__(message)

    @classmethod
    def default_message(cls) -> str:
        return "Validation error"


class DuplicateUsername(DomainError):
    code = "USERNAME_EXISTS"

    @classmethod
    def default_message(cls) -> str:
        return "Username already exists"


class InvalidCredentials(DomainError):
    # Message stays generic so a caller cannot tell which half was wrong
    code = "AUTH_INVALID_CREDENTIALS"

    @classmethod
    def default_message(cls) -> str:
        return "Incorrect username or password"


class AccessDenied(DomainError):
    code = "FORBIDDEN"

    @classmethod
    def default_message(cls) -> str:
        return "Access denied"


class UserNotFound(DomainError):
    code = "USER_NOT_FOUND"

    @classmethod
    def default_message(cls) -> str:
        return "User not found"


class TodoNotFound(DomainError):
    """Raised both when a Todo does not exist and when it belongs to someone else."""
    code = "TODO_NOT_FOUND"

    @classmethod
    def default_message(cls) -> str:
        return "Todo not found"


class InvalidStateError(DomainError):
    """Illegal entity transition (double complete, double delete, password re-init)."""
    code = "INVALID_STATE"

    @classmethod
    def default_message(cls) -> str:
        return "Operation not allowed in the current state"
