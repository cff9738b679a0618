"""
Todo Model
==========

Domain model representing a single TODO item owned by exactly one user.
This is a pure domain object with no infrastructure dependencies.
"""
import datetime as dt
import uuid
from dataclasses import dataclass, field
from typing import Optional

from todo_api.domain.errors import InvalidStateError, ValidationError
from todo_api.utils.datetime_utils import utc_now

TITLE_MAX_LENGTH = 32
DESCRIPTIONS_MAX_LENGTH = 128
SYSTEM_ACTOR = "system"


def validate_title(title: Optional[str]) -> None:
    if not title:
        raise ValidationError("Title is required", field="title")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters", field="title"
        )


def validate_descriptions(descriptions: Optional[str]) -> None:
    if descriptions is not None and len(descriptions) > DESCRIPTIONS_MAX_LENGTH:
        raise ValidationError(
            f"Descriptions must be at most {DESCRIPTIONS_MAX_LENGTH} characters",
            field="descriptions",
        )


@dataclass
class Todo:
    """
    Todo domain model.

    Guards its own state transitions: completion can only flip in one
    direction at a time and a deleted Todo cannot be changed any more.
    `user_id` is fixed at creation; ownership never moves.

    `id` is None until the repository assigns one on first save.
    """
    title: str
    user_id: uuid.UUID
    descriptions: Optional[str] = None
    completed: bool = False
    id: Optional[uuid.UUID] = None
    created_at: dt.datetime = field(default_factory=utc_now)
    created_by: str = SYSTEM_ACTOR
    updated_at: dt.datetime = field(default_factory=utc_now)
    updated_by: str = SYSTEM_ACTOR
    deleted: bool = False

    @classmethod
    def create(
        cls,
        title: str,
        descriptions: Optional[str],
        user_id: uuid.UUID,
        created_by: str = SYSTEM_ACTOR,
    ) -> "Todo":
        """
        Factory for a brand new Todo.

        Raises:
            ValidationError: title empty or longer than 32 characters,
                descriptions longer than 128 characters, or no owner given
        """
        validate_title(title)
        validate_descriptions(descriptions)
        if user_id is None:
            raise ValidationError("User ID is required", field="userId")
        now = utc_now()
        return cls(
            title=title,
            descriptions=descriptions,
            user_id=user_id,
            completed=False,
            created_at=now,
            created_by=created_by,
            updated_at=now,
            updated_by=created_by,
            deleted=False,
        )

    def _touch(self, updated_by: str) -> None:
        self.updated_at = utc_now()
        self.updated_by = updated_by

    def _ensure_not_deleted(self, action: str) -> None:
        if self.deleted:
            raise InvalidStateError(f"Deleted todo cannot be {action}")

    def mark_as_completed(self, updated_by: str = SYSTEM_ACTOR) -> None:
        """Flip to completed. Rejects deleted or already completed todos."""
        self._ensure_not_deleted("completed")
        if self.completed:
            raise InvalidStateError("Todo is already completed")
        self.completed = True
        self._touch(updated_by)

    def mark_as_incomplete(self, updated_by: str = SYSTEM_ACTOR) -> None:
        """Flip back to incomplete. Rejects deleted or not yet completed todos."""
        self._ensure_not_deleted("reopened")
        if not self.completed:
            raise InvalidStateError("Todo is not completed")
        self.completed = False
        self._touch(updated_by)

    def update_title(self, title: str, updated_by: str = SYSTEM_ACTOR) -> None:
        self._ensure_not_deleted("updated")
        validate_title(title)
        self.title = title
        self._touch(updated_by)

    def update_descriptions(
        self, descriptions: Optional[str], updated_by: str = SYSTEM_ACTOR
    ) -> None:
        self._ensure_not_deleted("updated")
        validate_descriptions(descriptions)
        self.descriptions = descriptions
        self._touch(updated_by)

    def delete(self, updated_by: str = SYSTEM_ACTOR) -> None:
        """Logical delete: the record is kept with `deleted=True`."""
        if self.deleted:
            raise InvalidStateError("Todo is already deleted")
        self.deleted = True
        self._touch(updated_by)

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        return self.user_id == user_id
