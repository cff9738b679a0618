"""
Unit tests for the auth and user-management use cases, run against
in-memory repositories.
"""
import uuid

import pytest

from todo_api.application.dto import Actor, ProfileChanges, UserChanges
from todo_api.application.use_cases.auth import LoginUseCase, RegisterUserUseCase
from todo_api.application.use_cases.todo import CreateTodoUseCase
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
from todo_api.domain.errors import (
    AccessDenied,
    DuplicateUsername,
    InvalidCredentials,
    InvalidStateError,
    UserNotFound,
    ValidationError,
)
from todo_api.domain.models.user import UserRole

pytestmark = pytest.mark.asyncio


def actor_for(user):
    return Actor(user_id=user.id, role=user.role, username=user.username)


# ----- registration / login -----
async def test_register_user(user_repo, encoder, tokens):
    result = await RegisterUserUseCase(user_repo, encoder, tokens).execute(
        "jane_doe", "Secret#123", first_name="Jane"
    )
    stored = user_repo.rows[result.user.id]
    assert stored.role == 8
    assert stored.first_name == "Jane"
    assert stored.password_hash == "hashed:Secret#123"
    assert result.token == f"token:{result.user.id}:8"


async def test_register_duplicate_username(user_repo, encoder, tokens):
    use_case = RegisterUserUseCase(user_repo, encoder, tokens)
    await use_case.execute("jane_doe", "Secret#123")
    with pytest.raises(DuplicateUsername):
        await use_case.execute("jane_doe", "Other#123")
    assert len(user_repo.rows) == 1


async def test_register_rejects_privileged_role(user_repo, encoder, tokens):
    with pytest.raises(ValidationError):
        await RegisterUserUseCase(user_repo, encoder, tokens).execute("boss", "Secret#123", role=1)


async def test_register_requires_password(user_repo, encoder, tokens):
    with pytest.raises(ValidationError):
        await RegisterUserUseCase(user_repo, encoder, tokens).execute("jane_doe", "")


async def test_login(make_user, user_repo, encoder, tokens):
    user = await make_user("jane_doe", password="Secret#123")
    result = await LoginUseCase(user_repo, encoder, tokens).execute("jane_doe", "Secret#123")
    assert result.user.id == user.id
    assert result.token


@pytest.mark.parametrize("username,password", [("jane_doe", "wrong"), ("nobody", "Secret#123")])
async def test_login_failures_look_identical(make_user, user_repo, encoder, tokens, username, password):
    await make_user("jane_doe", password="Secret#123")
    with pytest.raises(InvalidCredentials) as exc:
        await LoginUseCase(user_repo, encoder, tokens).execute(username, password)
    assert exc.value.message == "Incorrect username or password"


async def test_login_without_password_fails(make_user, user_repo, encoder, tokens):
    await make_user("locked", password=None)
    with pytest.raises(InvalidCredentials):
        await LoginUseCase(user_repo, encoder, tokens).execute("locked", "")


# ----- passwords -----
async def test_initialize_password_once(make_user, user_repo):
    user = await make_user(password=None)
    use_case = InitializePasswordUseCase(user_repo)
    await use_case.execute(user.id, "hashed:first")
    assert user_repo.rows[user.id].password_hash == "hashed:first"
    assert user_repo.rows[user.id].updated_by == "system"
    with pytest.raises(InvalidStateError):
        await use_case.execute(user.id, "hashed:second")


async def test_initialize_password_requires_manager(make_user, user_repo):
    target = await make_user(password=None)
    plain = await make_user()
    with pytest.raises(AccessDenied):
        await InitializePasswordUseCase(user_repo).execute(target.id, "hashed:x", actor_for(plain))


async def test_initialize_password_unknown_user(user_repo):
    with pytest.raises(UserNotFound):
        await InitializePasswordUseCase(user_repo).execute(uuid.uuid4(), "hashed:x")


async def test_change_password(make_user, user_repo, encoder):
    user = await make_user(password="Old#123")
    use_case = ChangePasswordUseCase(user_repo, encoder)
    with pytest.raises(InvalidCredentials):
        await use_case.execute(user.id, "wrong", "New#456")
    await use_case.execute(user.id, "Old#123", "New#456")
    assert encoder.verify("New#456", user_repo.rows[user.id].password_hash)


async def test_reset_password_by_manager(make_user, user_repo, encoder):
    manager = await make_user(role=UserRole.MANAGER)
    user = await make_user(password="Old#123")
    await ResetPasswordUseCase(user_repo, encoder).execute(actor_for(manager), user.id, "New#456")
    assert user_repo.rows[user.id].password_hash == "hashed:New#456"

    with pytest.raises(AccessDenied):
        await ResetPasswordUseCase(user_repo, encoder).execute(actor_for(user), manager.id, "x" * 8)


# ----- user management -----
async def test_get_user_self_or_manager(make_user, user_repo):
    user = await make_user()
    other = await make_user()
    manager = await make_user(role=UserRole.MANAGER)
    use_case = GetUserUseCase(user_repo)

    assert (await use_case.execute(actor_for(user), user.id)).id == user.id
    assert (await use_case.execute(actor_for(manager), user.id)).id == user.id
    with pytest.raises(AccessDenied):
        await use_case.execute(actor_for(user), other.id)


async def test_list_users_search_and_paging(make_user, user_repo):
    admin = await make_user("root", role=UserRole.ADMIN)
    for name in ("alice", "alicia", "bob"):
        await make_user(name)

    page = await ListUsersUseCase(user_repo).execute(actor_for(admin), 1, 20, "ALI")
    assert sorted(u.username for u in page.items) == ["alice", "alicia"]
    assert page.total == 2

    page = await ListUsersUseCase(user_repo).execute(actor_for(admin), 2, 3)
    assert page.total == 4
    assert len(page.items) == 1
    assert page.total_pages == 2


async def test_list_users_forbidden_for_user(make_user, user_repo):
    user = await make_user()
    with pytest.raises(AccessDenied):
        await ListUsersUseCase(user_repo).execute(actor_for(user))


async def test_create_user_without_password(make_user, user_repo, encoder):
    manager = await make_user(role=UserRole.MANAGER)
    created = await CreateUserUseCase(user_repo, encoder).execute(actor_for(manager), "newbie")
    assert created.has_password is False
    assert created.created_by == str(manager.id)


async def test_manager_cannot_create_admin(make_user, user_repo, encoder):
    manager = await make_user(role=UserRole.MANAGER)
    with pytest.raises(AccessDenied):
        await CreateUserUseCase(user_repo, encoder).execute(actor_for(manager), "boss", role=UserRole.ADMIN)


async def test_update_profile_only_supplied_fields(make_user, user_repo):
    user = await make_user()
    await UpdateProfileUseCase(user_repo).execute(user.id, ProfileChanges(first_name="Jane", last_name="Doe"))
    await UpdateProfileUseCase(user_repo).execute(user.id, ProfileChanges(last_name="Roe"))
    stored = user_repo.rows[user.id]
    assert (stored.first_name, stored.last_name) == ("Jane", "Roe")


async def test_update_user_rename_conflict(make_user, user_repo):
    admin = await make_user(role=UserRole.ADMIN)
    await make_user("taken")
    target = await make_user("target")
    with pytest.raises(DuplicateUsername):
        await UpdateUserUseCase(user_repo).execute(actor_for(admin), target.id, UserChanges(username="taken"))


async def test_update_user_role_rules(make_user, user_repo):
    admin = await make_user(role=UserRole.ADMIN)
    manager = await make_user(role=UserRole.MANAGER)
    target = await make_user()
    use_case = UpdateUserUseCase(user_repo)

    with pytest.raises(AccessDenied):
        await use_case.execute(actor_for(manager), target.id, UserChanges(role=UserRole.MANAGER))
    with pytest.raises(AccessDenied):
        await use_case.execute(actor_for(manager), admin.id, UserChanges(first_name="X"))
    with pytest.raises(InvalidStateError):
        await use_case.execute(actor_for(admin), admin.id, UserChanges(role=UserRole.USER))

    promoted = await use_case.execute(actor_for(admin), target.id, UserChanges(role=UserRole.MANAGER))
    assert promoted.role == UserRole.MANAGER


async def test_last_admin_cannot_be_demoted(make_user, user_repo):
    only_admin = await make_user(role=UserRole.ADMIN)
    # the acting admin is a token holder whose row has since been removed
    ghost = Actor(user_id=uuid.uuid4(), role=UserRole.ADMIN)
    with pytest.raises(InvalidStateError):
        await UpdateUserUseCase(user_repo).execute(ghost, only_admin.id, UserChanges(role=UserRole.USER))


async def test_delete_user_cascades_to_todos(make_user, user_repo, todo_repo):
    admin = await make_user(role=UserRole.ADMIN)
    user = await make_user()
    for title in ("a", "b"):
        await CreateTodoUseCase(todo_repo, user_repo).execute(title, None, user.id)

    await DeleteUserUseCase(user_repo, todo_repo).execute(actor_for(admin), user.id)

    assert user_repo.rows[user.id].deleted is True
    assert await user_repo.find_by_id(user.id) is None
    assert await todo_repo.find_by_user_id(user.id) == []
    stored = await todo_repo.find_all_by_user_id_including_deleted(user.id)
    assert len(stored) == 2
    assert {t.updated_by for t in stored} == {str(admin.id)}
    assert user_repo.rows[user.id].updated_by == str(admin.id)


async def test_delete_user_guards(make_user, user_repo, todo_repo):
    admin = await make_user(role=UserRole.ADMIN)
    manager = await make_user(role=UserRole.MANAGER)
    use_case = DeleteUserUseCase(user_repo, todo_repo)

    with pytest.raises(AccessDenied):
        await use_case.execute(actor_for(manager), admin.id)
    with pytest.raises(InvalidStateError):
        await use_case.execute(actor_for(admin), admin.id)
    with pytest.raises(UserNotFound):
        await use_case.execute(actor_for(admin), uuid.uuid4())


async def test_deleted_username_can_be_reused(make_user, user_repo, todo_repo, encoder, tokens):
    admin = await make_user(role=UserRole.ADMIN)
    user = await make_user("jane_doe")
    await DeleteUserUseCase(user_repo, todo_repo).execute(actor_for(admin), user.id)

    result = await RegisterUserUseCase(user_repo, encoder, tokens).execute("jane_doe", "Secret#123")
    assert result.user.id != user.id
