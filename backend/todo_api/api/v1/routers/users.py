# todo_api/api/v1/routers/users.py
import uuid

from fastapi import APIRouter, Depends, Query

from todo_api.api.v1.deps import (
    get_current_user,
    get_password_encoder,
    get_todo_repository,
    get_user_repository,
)
from todo_api.application.dto import UNSET, Actor, ProfileChanges, UserChanges
from todo_api.application.use_cases.user import (
    ChangePasswordUseCase,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    InitializePasswordUseCase,
    ListUsersUseCase,
    ResetPasswordUseCase,
    UpdateProfileUseCase,
    UpdateUserUseCase,
)
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.domain.services.security import PasswordEncoder
from todo_api.infrastructure.db import transactional
from todo_api.schemas.common import ApiResponse, PagedData, ok, paged
from todo_api.schemas.user import (
    PROFILE_FIELDS,
    ChangePasswordIn,
    PasswordIn,
    ProfileUpdateIn,
    UserCreateIn,
    UserOut,
    UserUpdateIn,
    user_to_dict,
)

router = APIRouter(prefix="/users", tags=["users"])


def _changes_from(body: ProfileUpdateIn, cls):
    """Map the supplied camelCase fields of a patch body onto a changes DTO."""
    supplied = body.model_dump(exclude_unset=True)
    values = {attr: supplied.get(name, UNSET) for name, attr in PROFILE_FIELDS.items()}
    for name in ("username", "role"):
        if name in supplied:
            values[name] = supplied[name]
    return cls(**values)


# ==============================================================================
# I. Self-service
#     Prefix: /api/users/me
# ==============================================================================
@router.get("/me", response_model=ApiResponse[UserOut])
async def get_me(
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Get the authenticated user's account.

    Errors:
        - 404 USER_NOT_FOUND: Account deleted since the token was issued
    """
    async with transactional():
        user = await GetUserUseCase(users).execute(current, current.user_id)
    return ok(user_to_dict(user))


@router.patch("/me", response_model=ApiResponse[UserOut])
async def update_me(
    body: ProfileUpdateIn,
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Update the authenticated user's name fields. Only provided fields change.
    """
    changes = _changes_from(body, ProfileChanges)
    async with transactional():
        user = await UpdateProfileUseCase(users).execute(current.user_id, changes)
    return ok(user_to_dict(user), "Profile updated")


@router.put("/me/password", response_model=ApiResponse[None])
async def change_my_password(
    body: ChangePasswordIn,
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    encoder: PasswordEncoder = Depends(get_password_encoder),
):
    """
    Change the authenticated user's password.

    Errors:
        - 401 AUTH_INVALID_CREDENTIALS: currentPassword does not match
    """
    async with transactional():
        await ChangePasswordUseCase(users, encoder).execute(
            current.user_id, body.currentPassword, body.newPassword
        )
    return ok(None, "Password changed")


# ==============================================================================
# II. User management (ADMIN / MANAGER)
#     Prefix: /api/users
# ==============================================================================
@router.get("", response_model=ApiResponse[PagedData[UserOut]])
async def list_users(
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    q: str | None = Query(default=None, description="Fuzzy search by username"),
    page: int = Query(1, ge=1),
    perPage: int = Query(20, ge=1, le=100),
):
    """
    Get paginated list of active users, newest first (ADMIN/MANAGER).
    """
    async with transactional():
        result = await ListUsersUseCase(users).execute(current, page, perPage, q)
    return ok(paged(result, user_to_dict))


@router.post("", response_model=ApiResponse[UserOut])
async def create_user(
    body: UserCreateIn,
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    encoder: PasswordEncoder = Depends(get_password_encoder),
):
    """
    Create a user account (ADMIN/MANAGER; privileged roles need ADMIN).

    The password is optional; without one the account stays locked until
    POST /users/{id}/initialize-password.
    """
    async with transactional():
        user = await CreateUserUseCase(users, encoder).execute(
            current,
            username=body.username,
            password=body.password,
            first_name=body.firstName,
            first_name_ruby=body.firstNameRuby,
            last_name=body.lastName,
            last_name_ruby=body.lastNameRuby,
            role=body.role,
        )
    return ok(user_to_dict(user), "User created")


@router.get("/{user_id}", response_model=ApiResponse[UserOut])
async def get_user(
    user_id: uuid.UUID,
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Get a user's details (ADMIN/MANAGER, or the user themselves).
    """
    async with transactional():
        user = await GetUserUseCase(users).execute(current, user_id)
    return ok(user_to_dict(user))


@router.patch("/{user_id}", response_model=ApiResponse[UserOut])
async def update_user(
    user_id: uuid.UUID,
    body: UserUpdateIn,
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Update user information (ADMIN/MANAGER).

    All fields are optional - only provided fields will be updated. Role
    changes require ADMIN; nobody changes their own role and the last admin
    cannot be demoted.
    """
    changes = _changes_from(body, UserChanges)
    async with transactional():
        user = await UpdateUserUseCase(users).execute(current, user_id, changes)
    return ok(user_to_dict(user), "User updated")


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(
    user_id: uuid.UUID,
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    todos: TodoRepository = Depends(get_todo_repository),
):
    """
    Logically delete a user account and its TODOs (ADMIN only).

    Errors:
        - 409 INVALID_STATE: Deleting yourself or the last admin
    """
    async with transactional():
        await DeleteUserUseCase(users, todos).execute(current, user_id)
    return ok(None, "User deleted")


@router.post("/{user_id}/initialize-password", response_model=ApiResponse[None])
async def initialize_password(
    user_id: uuid.UUID,
    body: PasswordIn,
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    encoder: PasswordEncoder = Depends(get_password_encoder),
):
    """
    Set the first password of an account created without one (ADMIN/MANAGER).

    Errors:
        - 409 INVALID_STATE: The account already has a password
    """
    async with transactional():
        await InitializePasswordUseCase(users).execute(user_id, encoder.hash(body.newPassword), current)
    return ok(None, "Password initialized")


@router.post("/{user_id}/reset-password", response_model=ApiResponse[None])
async def reset_password(
    user_id: uuid.UUID,
    body: PasswordIn,
    current: Actor = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    encoder: PasswordEncoder = Depends(get_password_encoder),
):
    """
    Reset a user's password without knowing the current one (ADMIN/MANAGER).
    """
    async with transactional():
        await ResetPasswordUseCase(users, encoder).execute(current, user_id, body.newPassword)
    return ok(None, "Password reset")
