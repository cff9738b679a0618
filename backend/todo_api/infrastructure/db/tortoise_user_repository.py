"""
Tortoise User Repository
========================

Concrete implementation of UserRepository using Tortoise ORM.
"""
import uuid
from typing import List, Optional

from tortoise.exceptions import IntegrityError

from todo_api.domain.errors import DuplicateUsername
from todo_api.domain.models.user import SYSTEM_ACTOR, User
from todo_api.domain.repositories.user_repository import UserRepository
from todo_api.models.user import UserModel


class TortoiseUserRepository(UserRepository):
    """Tortoise ORM implementation of UserRepository."""

    @staticmethod
    def _to_entity(row: UserModel) -> User:
        return User(
            id=row.id,
            username=row.username,
            first_name=row.first_name,
            first_name_ruby=row.first_name_ruby,
            last_name=row.last_name,
            last_name_ruby=row.last_name_ruby,
            role=row.role,
            password_hash=row.password_hash,
            created_at=row.created_at,
            created_by=row.created_by,
            updated_at=row.updated_at,
            updated_by=row.updated_by,
            deleted=row.deleted,
        )

    @staticmethod
    def _to_fields(user: User) -> dict:
        return {
            "username": user.username,
            "first_name": user.first_name,
            "first_name_ruby": user.first_name_ruby,
            "last_name": user.last_name,
            "last_name_ruby": user.last_name_ruby,
            "role": int(user.role),
            "password_hash": user.password_hash,
            "created_at": user.created_at,
            "created_by": user.created_by,
            "updated_at": user.updated_at,
            "updated_by": user.updated_by,
            "deleted": user.deleted,
        }

    @staticmethod
    def _live(query: Optional[str] = None):
        qs = UserModel.filter(deleted=False)
        if query:
            qs = qs.filter(username__icontains=query)
        return qs

    async def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        row = await UserModel.get_or_none(id=user_id, deleted=False)
        return self._to_entity(row) if row else None

    async def find_by_username(self, username: str) -> Optional[User]:
        row = await UserModel.filter(username=username, deleted=False).first()
        return self._to_entity(row) if row else None

    async def exists_by_username(self, username: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        qs = UserModel.filter(username=username, deleted=False)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return await qs.exists()

    async def save(self, user: User) -> User:
        """
        Insert when the entity has no ID yet, otherwise overwrite the full row.

        Raises:
            DuplicateUsername: Another non-deleted user already holds the
                username (enforced by the `uidx_users_username_live` index)
        """
        fields = self._to_fields(user)
        try:
            if user.id is None:
                row = await UserModel.create(**fields)
                user.id = row.id
                return user

            updated = await UserModel.filter(id=user.id).update(**fields)
            if not updated:
                await UserModel.create(id=user.id, **fields)
        except IntegrityError as exc:
            raise DuplicateUsername() from exc
        return user

    async def delete(self, user: User, updated_by: str = SYSTEM_ACTOR) -> None:
        user.delete(updated_by)
        await self.save(user)

    async def find_all(
        self, query: Optional[str] = None, offset: int = 0, limit: Optional[int] = None
    ) -> List[User]:
        qs = self._live(query).order_by("-created_at").offset(offset)
        if limit is not None:
            qs = qs.limit(limit)
        return [self._to_entity(r) for r in await qs]

    async def count(self, query: Optional[str] = None) -> int:
        return await self._live(query).count()

    async def count_by_role(self, role: int) -> int:
        return await UserModel.filter(role=int(role), deleted=False).count()
