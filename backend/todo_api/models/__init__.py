"""
Database models module initialization.
Exports the Tortoise ORM models backing the repository adapters.

Models exported:
- UserModel: `users` table
- TodoModel: `todos` table (belongs to UserModel)
"""
from .user import UserModel
from .todo import TodoModel
