"""Add favourite use case."""

from uuid import UUID

from pydantic import BaseModel

from quiz.application.usecase.base import BaseUseCase
from quiz.domain.service import FavouriteService
from quiz.domain.value import UserId

from .get_favourites import FavouritesResponse


class AddFavouriteRequest(BaseModel):
    """Add favourite request."""

    user_id: str  # User ID from authenticated user
    question: str | None = None
    options: list[str] | None = None
    answer: str | None = None
    external_id: str | None = None


class AddFavouriteUseCase(BaseUseCase):
    """Use case for bookmarking a question."""

    def __init__(self, favourite_service: FavouriteService) -> None:
        """Initialize add favourite use case.

        Args:
            favourite_service: Favourite domain service
        """
        self.favourite_service = favourite_service

    async def execute(self, request: AddFavouriteRequest) -> FavouritesResponse:
        """Execute add favourite flow.

        Args:
            request: Add favourite request

        Returns:
            Updated favourites list

        Raises:
            ValidationError: If question or answer is missing
            AlreadyExistsError: If the question is already a favourite
            NotFoundError: If user not found
        """
        entries = await self.favourite_service.add_favourite(
            UserId(UUID(request.user_id)),
            question=request.question,
            options=request.options,
            answer=request.answer,
            external_id=request.external_id,
        )
        return FavouritesResponse.from_entries(entries, message="Added to favourites")
