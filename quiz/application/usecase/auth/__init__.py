"""Authentication use cases."""

from .login import LoginRequest, LoginResponse, LoginUseCase
from .signup import SignupRequest, SignupResponse, SignupUseCase

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
]
