import pytest

from todo_api.config import settings
from todo_api.core.bootstrap import ensure_default_admin
from todo_api.domain.models.user import UserRole
from todo_api.infrastructure.db import TortoiseUserRepository


pytestmark = pytest.mark.asyncio


async def test_default_admin_created_once(client, monkeypatch):
    monkeypatch.setattr(settings, "admin_username", "admin")
    monkeypatch.setattr(settings, "admin_password", "Bootstrap#123")

    await ensure_default_admin()
    await ensure_default_admin()

    users = TortoiseUserRepository()
    assert await users.count_by_role(UserRole.ADMIN) == 1
    admin = await users.find_by_username("admin")
    assert admin.has_password
    assert admin.updated_by == "system"

    login = await client.post("/api/auth/login", json={"username": "admin", "password": "Bootstrap#123"})
    assert login.status_code == 200
    assert login.json()["data"]["user"]["roleName"] == "ADMIN"


async def test_default_admin_skipped_without_password(client, monkeypatch):
    monkeypatch.setattr(settings, "admin_password", None)

    await ensure_default_admin()

    assert await TortoiseUserRepository().count_by_role(UserRole.ADMIN) == 0


async def test_default_admin_avoids_taken_username(client, monkeypatch):
    monkeypatch.setattr(settings, "admin_username", "admin")
    monkeypatch.setattr(settings, "admin_password", "Bootstrap#123")
    await client.post("/api/auth/register", json={"username": "admin", "password": "Regular#123"})

    await ensure_default_admin()

    admin = await TortoiseUserRepository().find_by_username("admin2")
    assert admin is not None
    assert admin.is_admin
