"""
Role checks shared by the user-management use cases.
"""
from todo_api.domain.errors import AccessDenied

from .dto.common import Actor


def require_user_manager(actor: Actor) -> None:
    """ADMIN or MANAGER only."""
    if not actor.can_manage_users:
        raise AccessDenied("Administrator or manager role required")


def require_admin(actor: Actor) -> None:
    if not actor.is_admin:
        raise AccessDenied("Administrator role required")
