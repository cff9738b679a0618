import os
import uuid

TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from todo_api.core import db as db_module
from todo_api.domain.models.user import DEFAULT_ROLE, User, UserRole
from todo_api.infrastructure.db import TortoiseUserRepository
from todo_api.infrastructure.security import Argon2PasswordEncoder
from todo_api.main import app

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()
    await db_module.create_constraints()


@pytest_asyncio.fixture
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    await _init_test_db()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def db():
    """
    Fresh in-memory database for tests that talk to the repositories directly.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


async def _create_account(role: int, password: str, prefix: str) -> tuple[User, str]:
    user = User.create(username=f"{prefix}_{uuid.uuid4().hex[:6]}", role=role)
    user.initialize_password(Argon2PasswordEncoder().hash(password))
    user = await TortoiseUserRepository().save(user)
    return user, password


@pytest_asyncio.fixture
async def create_admin():
    """
    Factory fixture to create admin users directly through the repository.
    """

    async def _create_admin(password: str = "AdminPass!23") -> tuple[User, str]:
        return await _create_account(UserRole.ADMIN, password, "admin")

    return _create_admin


@pytest_asyncio.fixture
async def create_manager():
    async def _create_manager(password: str = "ManagerPass!23") -> tuple[User, str]:
        return await _create_account(UserRole.MANAGER, password, "manager")

    return _create_manager


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create regular users directly.
    """

    async def _create_user(password: str = "UserPass!23") -> tuple[User, str]:
        return await _create_account(DEFAULT_ROLE, password, "user")

    return _create_user


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(username: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/api/auth/login",
            json={"username": username, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers
