"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quiz.domain.error import DomainError
from quiz.domain.model.user import User
from quiz.domain.value import FavouriteEntry, ScoreEntry, UserId


class DuplicateKeyError(DomainError):
    """Raised when the store rejects a write on a uniqueness constraint."""

    pass


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.

    Besides whole-aggregate load/save, the repository exposes single-statement
    mutations for the sub-collections so that concurrent requests against the
    same user don't overwrite each other.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email (exact match).

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to create

        Returns:
            The created user

        Raises:
            DuplicateKeyError: If a user with the same email already exists
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Persist the full aggregate, replacing what is stored (last write wins).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def append_score(
        self, user_id: UserId, entry: ScoreEntry, diamonds_earned: int
    ) -> Optional[int]:
        """Atomically append a score entry and credit diamonds.

        Args:
            user_id: The user's unique identifier
            entry: Score entry to append
            diamonds_earned: Diamonds to add to the balance

        Returns:
            The new diamond balance, or None if the user does not exist
        """
        pass

    @abstractmethod
    async def add_favourite(self, user_id: UserId, entry: FavouriteEntry) -> None:
        """Append a favourite entry.

        Args:
            user_id: The user's unique identifier
            entry: Favourite entry to append

        Raises:
            DuplicateKeyError: If the store already holds an entry with the same key
        """
        pass

    @abstractmethod
    async def remove_favourites(self, user_id: UserId, key: str) -> int:
        """Remove every favourite addressed by ``key``.

        An entry matches on ``external_id``, or on ``question`` when it has
        no external id.

        Args:
            user_id: The user's unique identifier
            key: External id or question text

        Returns:
            Number of entries removed
        """
        pass

    @abstractmethod
    async def clear_favourites(self, user_id: UserId) -> None:
        """Atomically remove all of a user's favourites.

        Args:
            user_id: The user's unique identifier
        """
        pass
