"""Get favourites use case."""

from uuid import UUID

from pydantic import BaseModel

from quiz.application.usecase.base import BaseUseCase
from quiz.application.usecase.common import CamelModel, FavouriteInfo
from quiz.domain.service import FavouriteService
from quiz.domain.value import FavouriteEntry, UserId


class GetFavouritesRequest(BaseModel):
    """Get favourites request."""

    user_id: str


class FavouritesResponse(CamelModel):
    """Response carrying a user's full favourites list."""

    success: bool = True
    message: str | None = None
    favourites: list[FavouriteInfo]

    @classmethod
    def from_entries(
        cls, entries: list[FavouriteEntry], message: str | None = None
    ) -> "FavouritesResponse":
        return cls(
            message=message,
            favourites=[FavouriteInfo.from_entry(e) for e in entries],
        )


class GetFavouritesUseCase(BaseUseCase):
    """Use case for listing a user's favourite questions."""

    def __init__(self, favourite_service: FavouriteService) -> None:
        self.favourite_service = favourite_service

    async def execute(self, request: GetFavouritesRequest) -> FavouritesResponse:
        """Execute get favourites flow.

        Raises:
            NotFoundError: If user not found
        """
        entries = await self.favourite_service.list_favourites(
            UserId(UUID(request.user_id))
        )
        return FavouritesResponse.from_entries(entries)
