"""
Authentication Use Cases

All authentication-related business logic.
"""

from .signup_use_case import SignupUseCase
from .signin_use_case import SigninUseCase
from .logout_use_case import LogoutUseCase
from .resolve_current_user_use_case import ResolveCurrentUserUseCase
from .dtos import (
    SignupCommand,
    SigninCommand,
    UserInfo,
    AuthResponse,
    CurrentUserResponse,
    MessageResponse,
    HeartbeatResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "SigninUseCase",
    "LogoutUseCase",
    "ResolveCurrentUserUseCase",
    # DTOs - Commands
    "SignupCommand",
    "SigninCommand",
    # DTOs - Responses
    "UserInfo",
    "AuthResponse",
    "CurrentUserResponse",
    "MessageResponse",
    "HeartbeatResponse",
]
