"""Domain layer DI providers."""

from dishka import Scope, provide

from quiz.config import AuthSettings, RewardSettings
from quiz.domain.repository import UserRepository
from quiz.domain.service import (
    AccountService,
    FavouriteService,
    JWTService,
    PasswordService,
    ScoreService,
    UserService,
)
from quiz.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing domain service."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_account_service(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            user_repository=user_repository,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_score_service(
        self,
        user_repository: UserRepository,
        user_service: UserService,
        reward_settings: RewardSettings,
    ) -> ScoreService:
        """Provide score domain service."""
        return ScoreService(
            user_repository=user_repository,
            user_service=user_service,
            reward_settings=reward_settings,
        )

    @provide
    def get_favourite_service(
        self, user_repository: UserRepository, user_service: UserService
    ) -> FavouriteService:
        """Provide favourite domain service."""
        return FavouriteService(
            user_repository=user_repository, user_service=user_service
        )
