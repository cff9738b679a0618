"""
Todo domain services.
Stateless, read-only helpers over Todos that are already loaded in memory.
"""
import math
import uuid
from typing import Iterable, List, Sequence, Tuple, TypeVar, Union

from todo_api.domain.models.todo import Todo
from todo_api.domain.models.user import User

T = TypeVar("T")

SORT_FIELDS = ("createdAt", "updatedAt", "title")
SORT_ORDERS = ("asc", "desc")
COMPLETED_FILTERS = ("all", "completed", "incomplete")

_SORT_ATTRS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "title": "title",
}


def is_owner(todo: Todo, user: Union[User, uuid.UUID]) -> bool:
    """True iff the Todo belongs to the given user (entity or bare ID)."""
    user_id = user.id if isinstance(user, User) else user
    return todo.user_id == user_id


def filter_incomplete_todos(todos: Iterable[Todo]) -> List[Todo]:
    return [t for t in todos if not t.completed]


def filter_completed_todos(todos: Iterable[Todo]) -> List[Todo]:
    return [t for t in todos if t.completed]


def apply_completed_filter(todos: Iterable[Todo], completed_filter: str) -> List[Todo]:
    if completed_filter == "completed":
        return filter_completed_todos(todos)
    if completed_filter == "incomplete":
        return filter_incomplete_todos(todos)
    return list(todos)


def sort_todos(todos: Iterable[Todo], sort_by: str = "createdAt", sort_order: str = "asc") -> List[Todo]:
    """
    Sort Todos by one of createdAt / updatedAt / title.

    Ties keep a deterministic order by ID so pages never overlap.
    """
    attr = _SORT_ATTRS[sort_by]
    reverse = sort_order == "desc"
    return sorted(todos, key=lambda t: (getattr(t, attr), str(t.id)), reverse=reverse)


def total_pages(total: int, per_page: int) -> int:
    return math.ceil(total / per_page) if per_page else 0


def paginate(items: Sequence[T], page: int, per_page: int) -> Tuple[List[T], int]:
    """
    Slice one page out of `items` (pages are 1-based).

    Returns:
        (page items, total item count)
    """
    start = (page - 1) * per_page
    return list(items[start:start + per_page]), len(items)
