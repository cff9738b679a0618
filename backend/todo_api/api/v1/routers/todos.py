# todo_api/api/v1/routers/todos.py
import uuid
from typing import Literal

from fastapi import APIRouter, Depends, Query

from todo_api.api.v1.deps import get_current_user, get_todo_repository, get_user_repository
from todo_api.application.dto import Actor, ListTodosQuery, TodoChanges
from todo_api.application.use_cases.todo import (
    CompleteTodoUseCase,
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodoUseCase,
    IncompleteTodoUseCase,
    ListDeletedTodosUseCase,
    ListTodosUseCase,
    UpdateTodoUseCase,
)
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.infrastructure.db import transactional
from todo_api.schemas.common import ApiResponse, PagedData, ok, paged
from todo_api.schemas.todo import TodoCreateIn, TodoOut, TodoUpdateIn, todo_to_dict

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=ApiResponse[PagedData[TodoOut]])
async def list_todos(
    current: Actor = Depends(get_current_user),
    todos: TodoRepository = Depends(get_todo_repository),
    page: int = Query(1, ge=1),
    perPage: int = Query(20, ge=1, le=100),
    completedFilter: Literal["all", "completed", "incomplete"] = Query("all"),
    sortBy: Literal["createdAt", "updatedAt", "title"] = Query("createdAt"),
    sortOrder: Literal["asc", "desc"] = Query("asc"),
):
    """
    Get paginated list of the authenticated user's TODOs.

    Args:
        page: 1-based page number
        perPage: Page size (1-100)
        completedFilter: all | completed | incomplete
        sortBy: createdAt | updatedAt | title
        sortOrder: asc | desc

    Returns:
        dict: Envelope whose data holds items, total, page, perPage, totalPages
    """
    query = ListTodosQuery(
        page=page,
        per_page=perPage,
        completed_filter=completedFilter,
        sort_by=sortBy,
        sort_order=sortOrder,
    )
    async with transactional():
        result = await ListTodosUseCase(todos).execute(current.user_id, query)
    return ok(paged(result, todo_to_dict))


@router.post("", response_model=ApiResponse[TodoOut])
async def create_todo(
    body: TodoCreateIn,
    current: Actor = Depends(get_current_user),
    todos: TodoRepository = Depends(get_todo_repository),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Create a new TODO owned by the authenticated user.

    Errors:
        - 400 VALIDATION_ERROR: Title empty or over 32 chars, descriptions over 128 chars
        - 404 USER_NOT_FOUND: The caller's account no longer exists
    """
    async with transactional():
        todo = await CreateTodoUseCase(todos, users).execute(
            title=body.title,
            descriptions=body.descriptions,
            user_id=current.user_id,
            completed=body.completed,
        )
    return ok(todo_to_dict(todo), "Todo created")


@router.get("/trash", response_model=ApiResponse[PagedData[TodoOut]])
async def list_deleted_todos(
    current: Actor = Depends(get_current_user),
    todos: TodoRepository = Depends(get_todo_repository),
    page: int = Query(1, ge=1),
    perPage: int = Query(20, ge=1, le=100),
):
    """
    List the authenticated user's logically deleted TODOs, most recently
    deleted first.
    """
    async with transactional():
        result = await ListDeletedTodosUseCase(todos).execute(current.user_id, page, perPage)
    return ok(paged(result, todo_to_dict))


@router.get("/{todo_id}", response_model=ApiResponse[TodoOut])
async def get_todo(
    todo_id: uuid.UUID,
    current: Actor = Depends(get_current_user),
    todos: TodoRepository = Depends(get_todo_repository),
):
    """
    Get a single TODO.

    Errors:
        - 403 FORBIDDEN: TODO belongs to another user
        - 404 TODO_NOT_FOUND: No such TODO, or it has been deleted
    """
    async with transactional():
        todo = await GetTodoUseCase(todos).execute(todo_id, current.user_id)
    return ok(todo_to_dict(todo))


@router.put("/{todo_id}", response_model=ApiResponse[TodoOut])
async def update_todo(
    todo_id: uuid.UUID,
    body: TodoUpdateIn,
    current: Actor = Depends(get_current_user),
    todos: TodoRepository = Depends(get_todo_repository),
):
    """
    Update a TODO. Only fields present in the request body are applied.

    Errors:
        - 400 VALIDATION_ERROR: A supplied field violates its length limit
        - 403 FORBIDDEN: TODO belongs to another user
        - 404 TODO_NOT_FOUND: No such TODO, or it has been deleted
    """
    changes = TodoChanges(**body.model_dump(exclude_unset=True))
    async with transactional():
        todo = await UpdateTodoUseCase(todos).execute(todo_id, current.user_id, changes)
    return ok(todo_to_dict(todo), "Todo updated")


@router.post("/{todo_id}/complete", response_model=ApiResponse[TodoOut])
async def complete_todo(
    todo_id: uuid.UUID,
    current: Actor = Depends(get_current_user),
    todos: TodoRepository = Depends(get_todo_repository),
):
    """
    Mark a TODO as completed.

    Errors:
        - 404 TODO_NOT_FOUND: Not found or not owned by the caller
        - 409 INVALID_STATE: Already completed
    """
    async with transactional():
        todo = await CompleteTodoUseCase(todos).execute(todo_id, current.user_id)
    return ok(todo_to_dict(todo), "Todo completed")


@router.post("/{todo_id}/incomplete", response_model=ApiResponse[TodoOut])
async def incomplete_todo(
    todo_id: uuid.UUID,
    current: Actor = Depends(get_current_user),
    todos: TodoRepository = Depends(get_todo_repository),
):
    """
    Mark a completed TODO as not completed.

    Errors:
        - 404 TODO_NOT_FOUND: Not found or not owned by the caller
        - 409 INVALID_STATE: Not completed
    """
    async with transactional():
        todo = await IncompleteTodoUseCase(todos).execute(todo_id, current.user_id)
    return ok(todo_to_dict(todo), "Todo marked incomplete")


@router.delete("/{todo_id}", response_model=ApiResponse[None])
async def delete_todo(
    todo_id: uuid.UUID,
    current: Actor = Depends(get_current_user),
    todos: TodoRepository = Depends(get_todo_repository),
):
    """
    Logically delete a TODO. The record is kept with deleted=true and shows
    up in /todos/trash.

    Errors:
        - 404 TODO_NOT_FOUND: Not found, already deleted, or not owned by the caller
    """
    async with transactional():
        await DeleteTodoUseCase(todos).execute(todo_id, current.user_id)
    return ok(None, "Todo deleted")
