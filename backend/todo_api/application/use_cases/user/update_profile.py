"""
Update Profile Use Case
=======================

Self-service edit of the caller's own name fields.
"""
import uuid

from todo_api.application.dto.common import is_set
from todo_api.application.dto.user_dto import ProfileChanges
from todo_api.domain.errors import UserNotFound
from todo_api.domain.models.user import User
from todo_api.domain.repositories.user_repository import UserRepository


def merge_profile(user: User, changes: ProfileChanges, updated_by: str) -> None:
    """Apply only the supplied name fields through `User.update_profile`."""
    fields = ("first_name", "first_name_ruby", "last_name", "last_name_ruby")
    if not any(is_set(getattr(changes, name)) for name in fields):
        return
    merged = {
        name: getattr(changes, name) if is_set(getattr(changes, name)) else getattr(user, name)
        for name in fields
    }
    user.update_profile(updated_by=updated_by, **merged)


class UpdateProfileUseCase:
    def __init__(self, user_repository: UserRepository):
        self._users = user_repository

    async def execute(self, user_id: uuid.UUID, changes: ProfileChanges) -> User:
        """
        Raises:
            UserNotFound: Account missing or deleted
            ValidationError: A name field is longer than 50 characters
        """
        user = await self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        merge_profile(user, changes, str(user_id))
        return await self._users.save(user)
