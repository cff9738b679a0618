"""
In-memory doubles for the repository ports and security collaborators,
used by the use case unit tests.
"""
import copy
import uuid

import pytest

from todo_api.domain.errors import DuplicateUsername
from todo_api.domain.models.user import SYSTEM_ACTOR, User
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.domain.services.security import PasswordEncoder, TokenIssuer


class InMemoryTodoRepository(TodoRepository):
    """Stores copies so callers never share entity instances with the store."""

    def __init__(self):
        self.rows = {}
        self.saves = 0

    def _live(self):
        return [t for t in self.rows.values() if not t.deleted]

    async def find_by_id(self, todo_id):
        todo = self.rows.get(todo_id)
        return copy.deepcopy(todo) if todo and not todo.deleted else None

    async def find_by_user_id(self, user_id):
        return [copy.deepcopy(t) for t in self._live() if t.user_id == user_id]

    async def find_by_id_and_user_id(self, todo_id, user_id):
        todo = await self.find_by_id(todo_id)
        return todo if todo and todo.user_id == user_id else None

    async def find_all_by_user_id_including_deleted(self, user_id):
        return [copy.deepcopy(t) for t in self.rows.values() if t.user_id == user_id]

    async def save(self, todo):
        if todo.id is None:
            todo.id = uuid.uuid4()
        self.rows[todo.id] = copy.deepcopy(todo)
        self.saves += 1
        return todo

    async def delete(self, todo, updated_by=SYSTEM_ACTOR):
        todo.delete(updated_by)
        await self.save(todo)

    async def delete_by_id_and_user_id(self, todo_id, user_id):
        todo = await self.find_by_id_and_user_id(todo_id, user_id)
        if todo is None:
            return False
        await self.delete(todo, str(user_id))
        return True

    async def delete_all_by_user_id(self, user_id, updated_by=SYSTEM_ACTOR):
        owned = [t for t in self._live() if t.user_id == user_id]
        for todo in owned:
            todo.deleted = True
            todo.updated_by = updated_by
        return len(owned)


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.rows = {}

    def _live(self, query=None):
        users = [u for u in self.rows.values() if not u.deleted]
        if query:
            users = [u for u in users if query.lower() in u.username.lower()]
        return sorted(users, key=lambda u: u.created_at, reverse=True)

    async def find_by_id(self, user_id):
        user = self.rows.get(user_id)
        return copy.deepcopy(user) if user and not user.deleted else None

    async def find_by_username(self, username):
        for user in self._live():
            if user.username == username:
                return copy.deepcopy(user)
        return None

    async def exists_by_username(self, username, exclude_id=None):
        return any(u.username == username and u.id != exclude_id for u in self._live())

    async def save(self, user):
        if not user.deleted and any(
            u.username == user.username and u.id != user.id for u in self._live()
        ):
            raise DuplicateUsername()
        if user.id is None:
            user.id = uuid.uuid4()
        self.rows[user.id] = copy.deepcopy(user)
        return user

    async def delete(self, user, updated_by=SYSTEM_ACTOR):
        user.delete(updated_by)
        await self.save(user)

    async def find_all(self, query=None, offset=0, limit=None):
        users = self._live(query)[offset:]
        return [copy.deepcopy(u) for u in (users[:limit] if limit is not None else users)]

    async def count(self, query=None):
        return len(self._live(query))

    async def count_by_role(self, role):
        return sum(1 for u in self._live() if u.role == role)


class PlainPasswordEncoder(PasswordEncoder):
    def hash(self, plain):
        return f"hashed:{plain}"

    def verify(self, plain, hashed):
        return hashed == f"hashed:{plain}"


class StaticTokenIssuer(TokenIssuer):
    def issue(self, user_id, username, role):
        return f"token:{user_id}:{role}"


@pytest.fixture
def todo_repo():
    return InMemoryTodoRepository()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def encoder():
    return PlainPasswordEncoder()


@pytest.fixture
def tokens():
    return StaticTokenIssuer()


@pytest.fixture
def make_user(user_repo, encoder):
    """Factory storing a user (with password) in the in-memory repository."""

    async def _make_user(username=None, role=8, password="Secret#123"):
        user = User.create(username=username or f"user_{uuid.uuid4().hex[:6]}", role=role)
        if password:
            user.initialize_password(encoder.hash(password))
        return await user_repo.save(user)

    return _make_user
