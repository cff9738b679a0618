from .tortoise_todo_repository import TortoiseTodoRepository
from .tortoise_user_repository import TortoiseUserRepository
from .transaction import transactional
