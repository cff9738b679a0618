from .register_user import RegisterUserUseCase
from .login import LoginUseCase
