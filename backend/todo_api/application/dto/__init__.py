from .common import UNSET, Actor, Page, is_set
from .todo_dto import TodoChanges, ListTodosQuery
from .user_dto import AuthResult, ProfileChanges, UserChanges
