"""Favourite questions domain service."""

from typing import Optional

import logfire

from quiz.domain.error import AlreadyExistsError, ValidationError
from quiz.domain.repository import DuplicateKeyError, UserRepository
from quiz.domain.value import FavouriteEntry, UserId, utcnow

from .base import Service
from .user_service import UserService


class FavouriteService(Service):
    """Domain service for a user's favourite questions."""

    def __init__(
        self, user_repository: UserRepository, user_service: UserService
    ) -> None:
        """Initialize favourite service.

        Args:
            user_repository: User repository
            user_service: User domain service
        """
        self.user_repository = user_repository
        self.user_service = user_service

    async def list_favourites(self, user_id: UserId) -> list[FavouriteEntry]:
        """Get a user's favourites in insertion order.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(user_id)
        return list(user.favourites)

    async def add_favourite(
        self,
        user_id: UserId,
        question: str | None,
        options: list[str] | None,
        answer: str | None,
        external_id: Optional[str] = None,
    ) -> list[FavouriteEntry]:
        """Add a question to the user's favourites.

        Duplicates are detected by external id when the incoming item has
        one, otherwise by question text.

        Args:
            user_id: User ID
            question: Question text
            options: Answer options, in display order
            answer: Correct answer
            external_id: Client-side question identifier (optional)

        Returns:
            The updated favourites list

        Raises:
            ValidationError: If question or answer is missing
            AlreadyExistsError: If the question is already a favourite
            NotFoundError: If user not found
        """
        with logfire.span("favourite_service.add_favourite", user_id=str(user_id)):
            if not question or not answer:
                raise ValidationError("Question and answer are required")

            user = await self.user_service.get_by_id(user_id)

            if any(
                fav.is_duplicate_of(question, external_id) for fav in user.favourites
            ):
                logfire.info("Favourite already present", user_id=str(user_id))
                raise AlreadyExistsError("Already in favourites")

            entry = FavouriteEntry(
                question=question,
                options=options or [],
                answer=answer,
                external_id=external_id,
                added_at=utcnow(),
            )
            try:
                await self.user_repository.add_favourite(user_id, entry)
            except DuplicateKeyError:
                raise AlreadyExistsError("Already in favourites")

            logfire.info("Favourite added", user_id=str(user_id))
            return await self.list_favourites(user_id)

    async def remove_favourite(self, user_id: UserId, key: str) -> list[FavouriteEntry]:
        """Remove favourites addressed by ``key``.

        Removing a key that matches nothing is not an error.

        Args:
            user_id: User ID
            key: External id, or question text for entries without one

        Returns:
            The updated favourites list

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("favourite_service.remove_favourite", user_id=str(user_id)):
            await self.user_service.get_by_id(user_id)
            removed = await self.user_repository.remove_favourites(user_id, key)
            logfire.info("Favourites removed", user_id=str(user_id), count=removed)
            return await self.list_favourites(user_id)

    async def clear_favourites(self, user_id: UserId) -> list[FavouriteEntry]:
        """Remove all of a user's favourites.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("favourite_service.clear_favourites", user_id=str(user_id)):
            await self.user_service.get_by_id(user_id)
            await self.user_repository.clear_favourites(user_id)
            logfire.info("Favourites cleared", user_id=str(user_id))
            return []
