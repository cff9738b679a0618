from .initialize_password import InitializePasswordUseCase
from .change_password import ChangePasswordUseCase, ResetPasswordUseCase
from .update_profile import UpdateProfileUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .create_user import CreateUserUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase
