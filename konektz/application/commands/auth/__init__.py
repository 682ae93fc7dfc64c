"""Auth commands."""

from .login_user import LoginResult, LoginUserCommand, LoginUserHandler
from .register_user import RegisterUserCommand, RegisterUserHandler

__all__ = [
    "LoginResult",
    "LoginUserCommand",
    "LoginUserHandler",
    "RegisterUserCommand",
    "RegisterUserHandler",
]
