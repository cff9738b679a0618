# todo_api/models/todo.py
"""
Database model for todos.
Each row belongs to exactly one user through `user_id`.
"""
import uuid
from tortoise import fields, models


class TodoModel(models.Model):
    """
    Todo database model.

    Relationships:
    - Belongs to a User (many-to-one); cascade delete when the user row is removed
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key
    title = fields.CharField(max_length=32)  # 1-32 characters
    descriptions = fields.CharField(max_length=128, null=True)
    completed = fields.BooleanField(default=False)
    user = fields.ForeignKeyField(
        "models.UserModel",
        related_name="todos",
        on_delete=fields.CASCADE,
        index=True,
    )  # Owner; never reassigned

    created_at = fields.DatetimeField()
    created_by = fields.CharField(max_length=64, default="system")
    updated_at = fields.DatetimeField()
    updated_by = fields.CharField(max_length=64, default="system")
    deleted = fields.BooleanField(default=False, index=True)  # Logical delete flag

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "todos"
