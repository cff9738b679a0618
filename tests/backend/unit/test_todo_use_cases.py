"""
Unit tests for the Todo use cases, run against in-memory repositories.
"""
import uuid

import pytest

from todo_api.application.dto import ListTodosQuery, TodoChanges
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
from todo_api.domain.errors import (
    AccessDenied,
    InvalidStateError,
    TodoNotFound,
    UserNotFound,
    ValidationError,
)

pytestmark = pytest.mark.asyncio


@pytest.fixture
def create(todo_repo, user_repo):
    async def _create(owner, title="Buy milk", descriptions=None, completed=False):
        return await CreateTodoUseCase(todo_repo, user_repo).execute(title, descriptions, owner.id, completed)

    return _create


async def test_create_todo_for_existing_user(make_user, create, todo_repo):
    owner = await make_user()
    todo = await create(owner, descriptions="2 liters")
    assert todo.id in todo_repo.rows
    assert todo.completed is False
    assert todo.created_by == str(owner.id)


async def test_create_todo_already_completed(make_user, create):
    owner = await make_user()
    todo = await create(owner, completed=True)
    assert todo.completed is True


async def test_create_todo_for_unknown_user(todo_repo, user_repo):
    with pytest.raises(UserNotFound):
        await CreateTodoUseCase(todo_repo, user_repo).execute("Buy milk", None, uuid.uuid4())
    assert todo_repo.rows == {}


async def test_create_todo_title_too_long(make_user, create, todo_repo):
    owner = await make_user()
    with pytest.raises(ValidationError):
        await create(owner, title="x" * 33)
    assert todo_repo.rows == {}


async def test_get_todo_owner_and_stranger(make_user, create, todo_repo):
    owner = await make_user()
    stranger = await make_user()
    todo = await create(owner)

    found = await GetTodoUseCase(todo_repo).execute(todo.id, owner.id)
    assert found.title == "Buy milk"

    with pytest.raises(AccessDenied):
        await GetTodoUseCase(todo_repo).execute(todo.id, stranger.id)
    with pytest.raises(TodoNotFound):
        await GetTodoUseCase(todo_repo).execute(uuid.uuid4(), owner.id)


async def test_update_todo_partial(make_user, create, todo_repo):
    owner = await make_user()
    todo = await create(owner, descriptions="keep me")

    updated = await UpdateTodoUseCase(todo_repo).execute(todo.id, owner.id, TodoChanges(title="Buy bread"))
    assert updated.title == "Buy bread"
    assert updated.descriptions == "keep me"
    assert todo_repo.rows[todo.id].title == "Buy bread"


async def test_update_todo_completed_toggles_only_on_change(make_user, create, todo_repo):
    owner = await make_user()
    todo = await create(owner)
    use_case = UpdateTodoUseCase(todo_repo)

    result = await use_case.execute(todo.id, owner.id, TodoChanges(completed=True))
    assert result.completed is True
    # resending the current value is not a double completion
    result = await use_case.execute(todo.id, owner.id, TodoChanges(completed=True))
    assert result.completed is True
    result = await use_case.execute(todo.id, owner.id, TodoChanges(completed=False))
    assert result.completed is False


async def test_update_todo_by_stranger(make_user, create, todo_repo):
    owner = await make_user()
    stranger = await make_user()
    todo = await create(owner)
    with pytest.raises(AccessDenied):
        await UpdateTodoUseCase(todo_repo).execute(todo.id, stranger.id, TodoChanges(title="Hacked"))
    assert todo_repo.rows[todo.id].title == "Buy milk"


async def test_complete_and_incomplete(make_user, create, todo_repo):
    owner = await make_user()
    todo = await create(owner)

    done = await CompleteTodoUseCase(todo_repo).execute(todo.id, owner.id)
    assert done.completed is True
    with pytest.raises(InvalidStateError):
        await CompleteTodoUseCase(todo_repo).execute(todo.id, owner.id)

    reopened = await IncompleteTodoUseCase(todo_repo).execute(todo.id, owner.id)
    assert reopened.completed is False
    with pytest.raises(InvalidStateError):
        await IncompleteTodoUseCase(todo_repo).execute(todo.id, owner.id)


async def test_complete_hides_foreign_todo(make_user, create, todo_repo):
    """Someone else's Todo is reported as missing, not forbidden."""
    owner = await make_user()
    stranger = await make_user()
    todo = await create(owner)
    with pytest.raises(TodoNotFound):
        await CompleteTodoUseCase(todo_repo).execute(todo.id, stranger.id)


async def test_delete_todo_is_logical(make_user, create, todo_repo):
    owner = await make_user()
    todo = await create(owner)

    await DeleteTodoUseCase(todo_repo).execute(todo.id, owner.id)
    assert todo_repo.rows[todo.id].deleted is True
    assert todo_repo.rows[todo.id].updated_by == str(owner.id)
    with pytest.raises(TodoNotFound):
        await GetTodoUseCase(todo_repo).execute(todo.id, owner.id)
    with pytest.raises(TodoNotFound):
        await DeleteTodoUseCase(todo_repo).execute(todo.id, owner.id)


async def test_list_todos_pagination(make_user, create, todo_repo):
    owner = await make_user()
    other = await make_user()
    for i in range(50):
        await create(owner, title=f"todo {i:02d}")
    await create(other, title="not mine")

    page = await ListTodosUseCase(todo_repo).execute(
        owner.id, ListTodosQuery(page=2, per_page=20, sort_by="title")
    )
    assert [t.title for t in page.items] == [f"todo {i:02d}" for i in range(20, 40)]
    assert page.total == 50
    assert page.total_pages == 3


async def test_list_todos_filters_and_excludes_deleted(make_user, create, todo_repo):
    owner = await make_user()
    await create(owner, title="open")
    await create(owner, title="done", completed=True)
    gone = await create(owner, title="gone")
    await DeleteTodoUseCase(todo_repo).execute(gone.id, owner.id)

    use_case = ListTodosUseCase(todo_repo)
    everything = await use_case.execute(owner.id)
    assert sorted(t.title for t in everything.items) == ["done", "open"]

    completed = await use_case.execute(owner.id, ListTodosQuery(completed_filter="completed"))
    assert [t.title for t in completed.items] == ["done"]


async def test_list_todos_rejects_bad_query(make_user, todo_repo):
    owner = await make_user()
    with pytest.raises(ValidationError):
        await ListTodosUseCase(todo_repo).execute(owner.id, ListTodosQuery(per_page=101))
    with pytest.raises(ValidationError):
        await ListTodosUseCase(todo_repo).execute(owner.id, ListTodosQuery(sort_by="priority"))


async def test_list_deleted_todos(make_user, create, todo_repo):
    owner = await make_user()
    await create(owner, title="alive")
    first = await create(owner, title="first")
    second = await create(owner, title="second")
    await DeleteTodoUseCase(todo_repo).execute(first.id, owner.id)
    await DeleteTodoUseCase(todo_repo).execute(second.id, owner.id)

    page = await ListDeletedTodosUseCase(todo_repo).execute(owner.id)
    assert [t.title for t in page.items] == ["second", "first"]
    assert page.total == 2
