"""Application layer DI providers."""

from dishka import Scope, provide

from quiz.application.usecase.auth import LoginUseCase, SignupUseCase
from quiz.application.usecase.favourite import (
    AddFavouriteUseCase,
    ClearFavouritesUseCase,
    GetFavouritesUseCase,
    RemoveFavouriteUseCase,
)
from quiz.application.usecase.score import (
    GetDiamondsUseCase,
    GetScoresUseCase,
    SubmitScoreUseCase,
)
from quiz.domain.service import AccountService, FavouriteService, ScoreService
from quiz.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_signup_use_case(self, account_service: AccountService) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(account_service=account_service)

    @provide
    def get_login_use_case(self, account_service: AccountService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(account_service=account_service)

    # Score use cases
    @provide
    def get_submit_score_use_case(
        self, score_service: ScoreService
    ) -> SubmitScoreUseCase:
        """Provide submit score use case."""
        return SubmitScoreUseCase(score_service=score_service)

    @provide
    def get_get_scores_use_case(self, score_service: ScoreService) -> GetScoresUseCase:
        """Provide get scores use case."""
        return GetScoresUseCase(score_service=score_service)

    @provide
    def get_get_diamonds_use_case(
        self, score_service: ScoreService
    ) -> GetDiamondsUseCase:
        """Provide get diamonds use case."""
        return GetDiamondsUseCase(score_service=score_service)

    # Favourite use cases
    @provide
    def get_get_favourites_use_case(
        self, favourite_service: FavouriteService
    ) -> GetFavouritesUseCase:
        """Provide get favourites use case."""
        return GetFavouritesUseCase(favourite_service=favourite_service)

    @provide
    def get_add_favourite_use_case(
        self, favourite_service: FavouriteService
    ) -> AddFavouriteUseCase:
        """Provide add favourite use case."""
        return AddFavouriteUseCase(favourite_service=favourite_service)

    @provide
    def get_remove_favourite_use_case(
        self, favourite_service: FavouriteService
    ) -> RemoveFavouriteUseCase:
        """Provide remove favourite use case."""
        return RemoveFavouriteUseCase(favourite_service=favourite_service)

    @provide
    def get_clear_favourites_use_case(
        self, favourite_service: FavouriteService
    ) -> ClearFavouritesUseCase:
        """Provide clear favourites use case."""
        return ClearFavouritesUseCase(favourite_service=favourite_service)
