from .create_todo import CreateTodoUseCase
from .get_todo import GetTodoUseCase
from .update_todo import UpdateTodoUseCase
from .complete_todo import CompleteTodoUseCase, IncompleteTodoUseCase
from .delete_todo import DeleteTodoUseCase
from .list_todos import ListTodosUseCase, ListDeletedTodosUseCase
