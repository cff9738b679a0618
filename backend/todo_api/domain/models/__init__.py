from .todo import Todo
from .user import User, UserRole, DEFAULT_ROLE
