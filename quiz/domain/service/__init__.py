"""Domain services."""

from .account_service import AccountService, AuthResult
from .base import Service
from .favourite_service import FavouriteService
from .jwt_service import JWTService
from .password_service import PasswordService
from .score_service import ScoreHistory, ScoreService, ScoreSubmission
from .user_service import UserService

__all__ = [
    "AccountService",
    "AuthResult",
    "FavouriteService",
    "JWTService",
    "PasswordService",
    "ScoreHistory",
    "ScoreService",
    "ScoreSubmission",
    "Service",
    "UserService",
]
