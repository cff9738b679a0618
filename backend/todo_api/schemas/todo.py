# todo_api/schemas/todo.py
"""
Pydantic schemas for TODO endpoints.
"""
from typing import Optional

from pydantic import BaseModel

from todo_api.domain.models.todo import Todo
from todo_api.utils.datetime_utils import to_iso


class TodoCreateIn(BaseModel):
    """
    Request model for creating a TODO.
    Length limits (title 1-32, descriptions <= 128) are enforced by the domain model.
    """
    title: str
    descriptions: Optional[str] = None
    completed: bool = False  # Create the TODO already completed


class TodoUpdateIn(BaseModel):
    """
    Request model for updating a TODO. Only fields present in the body are applied.
    """
    title: Optional[str] = None
    descriptions: Optional[str] = None
    completed: Optional[bool] = None


class TodoOut(BaseModel):
    """
    TODO item returned by the API.
    """
    id: str  # TODO unique identifier
    title: str
    descriptions: Optional[str] = None
    completed: bool
    userId: str  # Owner
    createdAt: str  # ISO 8601
    createdBy: str
    updatedAt: str  # ISO 8601
    updatedBy: str
    deleted: bool


def todo_to_dict(t: Todo) -> dict:
    """Convert a Todo entity to its camelCase API representation."""
    return {
        "id": str(t.id),
        "title": t.title,
        "descriptions": t.descriptions,
        "completed": t.completed,
        "userId": str(t.user_id),
        "createdAt": to_iso(t.created_at),
        "createdBy": t.created_by,
        "updatedAt": to_iso(t.updated_at),
        "updatedBy": t.updated_by,
        "deleted": t.deleted,
    }
