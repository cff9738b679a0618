# todo_api/models/user.py
"""
Database model for users.
Persistence shape of the `users` table; the domain entity lives in
todo_api.domain.models.user and is mapped by the Tortoise user repository.
"""
import uuid
from tortoise import fields, models


class UserModel(models.Model):
    """
    User database model.

    Relationships:
    - Has many Todos (one-to-many, via related_name="todos"); physical deletion
      of a user row cascades to its todos

    Security:
    - Password is stored as an argon2 hash, nullable until initialized
    - Username is unique among non-deleted rows through the partial index
      `uidx_users_username_live` (see todo_api.core.db), so a deleted
      account frees its username
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key
    username = fields.CharField(max_length=50, index=True)  # Login name, unique among non-deleted rows
    first_name = fields.CharField(max_length=50, null=True)
    first_name_ruby = fields.CharField(max_length=50, null=True)  # Phonetic reading of first name
    last_name = fields.CharField(max_length=50, null=True)
    last_name_ruby = fields.CharField(max_length=50, null=True)  # Phonetic reading of last name
    role = fields.IntField(default=8)  # 1=ADMIN, 2=MANAGER, 3+=USER
    password_hash = fields.CharField(max_length=255, null=True)  # Never serialized outward

    created_at = fields.DatetimeField()
    created_by = fields.CharField(max_length=64, default="system")
    updated_at = fields.DatetimeField()
    updated_by = fields.CharField(max_length=64, default="system")
    deleted = fields.BooleanField(default=False, index=True)  # Logical delete flag

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"
