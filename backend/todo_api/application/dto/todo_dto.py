"""
Todo use case inputs.
"""
from dataclasses import dataclass
from typing import Any

from todo_api.domain.errors import ValidationError
from todo_api.domain.services.todo_service import COMPLETED_FILTERS, SORT_FIELDS, SORT_ORDERS

from .common import UNSET

MAX_PER_PAGE = 100
DEFAULT_PER_PAGE = 20


@dataclass
class TodoChanges:
    """
    Partial update for a Todo. Fields left as UNSET are not touched.
    """
    title: Any = UNSET
    descriptions: Any = UNSET
    completed: Any = UNSET


@dataclass
class ListTodosQuery:
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE
    completed_filter: str = "all"
    sort_by: str = "createdAt"
    sort_order: str = "asc"

    def validate(self) -> None:
        if self.page < 1:
            raise ValidationError("page must be 1 or greater", field="page")
        if not 1 <= self.per_page <= MAX_PER_PAGE:
            raise ValidationError(f"perPage must be between 1 and {MAX_PER_PAGE}", field="perPage")
        if self.completed_filter not in COMPLETED_FILTERS:
            raise ValidationError(
                f"completedFilter must be one of {', '.join(COMPLETED_FILTERS)}", field="completedFilter"
            )
        if self.sort_by not in SORT_FIELDS:
            raise ValidationError(f"sortBy must be one of {', '.join(SORT_FIELDS)}", field="sortBy")
        if self.sort_order not in SORT_ORDERS:
            raise ValidationError(f"sortOrder must be one of {', '.join(SORT_ORDERS)}", field="sortOrder")
