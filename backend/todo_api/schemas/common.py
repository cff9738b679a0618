# todo_api/schemas/common.py
"""
Response envelope shared by every endpoint.

    {"success": true, "message": "Request successful", "data": {...}}
"""
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from todo_api.application.dto.common import Page

T = TypeVar("T")

SUCCESS_MESSAGE = "Request successful"


class ApiResponse(BaseModel, Generic[T]):
    """Uniform response envelope."""
    success: bool  # Whether the request succeeded
    message: str  # Human readable outcome
    data: Optional[T] = None  # Payload, or error details on failure


class PagedData(BaseModel, Generic[T]):
    """Paginated payload placed in ApiResponse.data."""
    items: List[T]  # Items on the current page
    total: int  # Total number of items across all pages
    page: int  # Current page (1-based)
    perPage: int  # Page size
    totalPages: int  # ceil(total / perPage)


def ok(data: Any = None, message: str = SUCCESS_MESSAGE) -> dict:
    """Build a success envelope."""
    return {"success": True, "message": message, "data": data}


def error(message: str, data: Any = None) -> dict:
    """Build a failure envelope."""
    return {"success": False, "message": message, "data": data}


def paged(page: Page, serialize) -> dict:
    """Convert an application Page into the PagedData dict shape."""
    return {
        "items": [serialize(item) for item in page.items],
        "total": page.total,
        "page": page.page,
        "perPage": page.per_page,
        "totalPages": page.total_pages,
    }
