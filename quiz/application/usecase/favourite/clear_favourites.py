"""Clear favourites use case."""

from uuid import UUID

from pydantic import BaseModel

from quiz.application.usecase.base import BaseUseCase
from quiz.domain.service import FavouriteService
from quiz.domain.value import UserId

from .get_favourites import FavouritesResponse


class ClearFavouritesRequest(BaseModel):
    """Clear favourites request."""

    user_id: str


class ClearFavouritesUseCase(BaseUseCase):
    """Use case for removing every bookmarked question."""

    def __init__(self, favourite_service: FavouriteService) -> None:
        self.favourite_service = favourite_service

    async def execute(self, request: ClearFavouritesRequest) -> FavouritesResponse:
        entries = await self.favourite_service.clear_favourites(
            UserId(UUID(request.user_id))
        )
        return FavouritesResponse.from_entries(
            entries, message="All favourites cleared"
        )
