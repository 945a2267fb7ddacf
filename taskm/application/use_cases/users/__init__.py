from .authorize_user import AuthorizeUserUseCase
from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase

__all__ = ["AuthorizeUserUseCase", "LoginUserUseCase", "RegisterUserUseCase"]
