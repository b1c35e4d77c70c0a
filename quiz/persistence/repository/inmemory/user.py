"""In-memory user repository for testing."""

from typing import Optional

from quiz.domain.model.user import User
from quiz.domain.repository.user import DuplicateKeyError, UserRepository
from quiz.domain.value import FavouriteEntry, ScoreEntry, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Emulates the unique constraints of the PostgreSQL schema.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def create(self, user: User) -> User:
        """Insert a new user, enforcing unique email."""
        if await self.find_by_email(user.email) is not None:
            raise DuplicateKeyError(f"User already exists: {user.email}")
        self._users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def append_score(
        self, user_id: UserId, entry: ScoreEntry, diamonds_earned: int
    ) -> Optional[int]:
        """Append a score and credit diamonds."""
        user = self._users.get(user_id)
        if not user:
            return None
        updated_user = user.model_copy(
            update={
                "scores": [*user.scores, entry],
                "diamonds": user.diamonds + diamonds_earned,
            }
        )
        self._users[user_id] = updated_user
        return updated_user.diamonds

    async def add_favourite(self, user_id: UserId, entry: FavouriteEntry) -> None:
        """Append a favourite, enforcing the unique indexes."""
        user = self._users.get(user_id)
        if not user:
            return
        for fav in user.favourites:
            if entry.external_id is not None and fav.external_id == entry.external_id:
                raise DuplicateKeyError("Favourite already exists")
            if (
                entry.external_id is None
                and fav.external_id is None
                and fav.question == entry.question
            ):
                raise DuplicateKeyError("Favourite already exists")
        self._users[user_id] = user.model_copy(
            update={"favourites": [*user.favourites, entry]}
        )

    async def remove_favourites(self, user_id: UserId, key: str) -> int:
        """Remove favourites addressed by ``key``."""
        user = self._users.get(user_id)
        if not user:
            return 0
        kept = [fav for fav in user.favourites if not fav.matches_key(key)]
        self._users[user_id] = user.model_copy(update={"favourites": kept})
        return len(user.favourites) - len(kept)

    async def clear_favourites(self, user_id: UserId) -> None:
        """Remove all favourites."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(update={"favourites": []})
