"""Remove favourite use case."""

from uuid import UUID

from pydantic import BaseModel

from quiz.application.usecase.base import BaseUseCase
from quiz.domain.service import FavouriteService
from quiz.domain.value import UserId

from .get_favourites import FavouritesResponse


class RemoveFavouriteRequest(BaseModel):
    """Remove favourite request."""

    user_id: str
    key: str  # External id, or question text for entries without one


class RemoveFavouriteUseCase(BaseUseCase):
    """Use case for removing a bookmarked question."""

    def __init__(self, favourite_service: FavouriteService) -> None:
        self.favourite_service = favourite_service

    async def execute(self, request: RemoveFavouriteRequest) -> FavouritesResponse:
        """Execute remove favourite flow.

        A key that matches nothing still succeeds with the unchanged list.

        Raises:
            NotFoundError: If user not found
        """
        entries = await self.favourite_service.remove_favourite(
            UserId(UUID(request.user_id)), request.key
        )
        return FavouritesResponse.from_entries(
            entries, message="Removed from favourites"
        )
