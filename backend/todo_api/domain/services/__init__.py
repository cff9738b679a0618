from .todo_service import (
    is_owner,
    filter_completed_todos,
    filter_incomplete_todos,
    sort_todos,
    paginate,
)
from .security import PasswordEncoder, TokenIssuer
