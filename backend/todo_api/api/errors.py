# todo_api/api/errors.py
"""
Translation of failures into HTTP responses.

Every domain error maps to exactly one status code; the body always uses the
{success, message, data} envelope. Unexpected exceptions become a generic 500
with no internal detail.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.domain.errors import (
    AccessDenied,
    DomainError,
    DuplicateUsername,
    InvalidCredentials,
    InvalidStateError,
    TodoNotFound,
    UserNotFound,
    ValidationError,
)
from todo_api.schemas.common import error
from todo_api.utils.datetime_utils import to_iso, utc_now

logger = logging.getLogger("uvicorn.error")

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DuplicateUsername: status.HTTP_400_BAD_REQUEST,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    AccessDenied: status.HTTP_403_FORBIDDEN,
    UserNotFound: status.HTTP_404_NOT_FOUND,
    TodoNotFound: status.HTTP_404_NOT_FOUND,
    InvalidStateError: status.HTTP_409_CONFLICT,
}


def status_for(exc: DomainError) -> int:
    for klass in type(exc).__mro__:
        if klass in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[klass]
    return status.HTTP_400_BAD_REQUEST


def _details(request: Request, code: str, errors: dict | None = None) -> dict:
    data = {"code": code, "timestamp": to_iso(utc_now()), "path": request.url.path}
    if errors:
        data["errors"] = errors
    return data


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    errors = None
    if isinstance(exc, ValidationError) and exc.field:
        errors = {exc.field: exc.message}
    return JSONResponse(
        status_code=status_for(exc),
        content=error(exc.message, _details(request, exc.code, errors)),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, str] = {}
    for item in exc.errors():
        loc = [str(part) for part in item.get("loc", ()) if part not in ("body", "query", "path", "header")]
        errors[".".join(loc) or "request"] = item.get("msg", "Invalid value")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error("Validation error", _details(request, "VALIDATION_ERROR", errors)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("message") or detail.get("code") or "Request failed"
        data = {"code": detail.get("code")}
    else:
        message, data = str(detail), None
    return JSONResponse(
        status_code=exc.status_code,
        content=error(message, data),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("[api] unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
