"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quiz.domain.model import User
from quiz.domain.repository import DuplicateKeyError, UserRepository
from quiz.domain.value import FavouriteEntry, ScoreEntry, UserId
from quiz.persistence.mappers import (
    favourite_entry_to_dict,
    row_to_user,
    score_entry_to_dict,
    user_to_dict,
)
from quiz.persistence.tables import (
    user_favourites_table,
    user_scores_table,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, with scores and favourites loaded."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._load(stmt)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email (exact match)."""
        stmt = select(users_table).where(users_table.c.email == email)
        return await self._load(stmt)

    async def _load(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        scores = await self.session.execute(
            select(user_scores_table)
            .where(user_scores_table.c.user_id == row["id"])
            .order_by(user_scores_table.c.id)
        )
        favourites = await self.session.execute(
            select(user_favourites_table)
            .where(user_favourites_table.c.user_id == row["id"])
            .order_by(user_favourites_table.c.id)
        )
        return row_to_user(
            dict(row), scores.mappings().all(), favourites.mappings().all()
        )

    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises:
            DuplicateKeyError: If the email violates the unique constraint
        """
        try:
            # Savepoint keeps the request transaction usable after a violation
            async with self.session.begin_nested():
                await self.session.execute(
                    users_table.insert().values(**user_to_dict(user))
                )
                await self._insert_children(user)
        except IntegrityError as e:
            raise DuplicateKeyError(f"User already exists: {user.email}") from e
        return user

    async def save(self, user: User) -> User:
        """Save the full aggregate (create or replace)."""
        existing = await self.session.execute(
            select(users_table.c.id).where(users_table.c.id == user.id)
        )
        user_dict = user_to_dict(user)

        if existing.first():
            await self.session.execute(
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(
                delete(user_scores_table).where(user_scores_table.c.user_id == user.id)
            )
            await self.session.execute(
                delete(user_favourites_table).where(
                    user_favourites_table.c.user_id == user.id
                )
            )
        else:
            await self.session.execute(users_table.insert().values(**user_dict))

        await self._insert_children(user)
        await self.session.flush()
        return user

    async def _insert_children(self, user: User) -> None:
        if user.scores:
            await self.session.execute(
                user_scores_table.insert(),
                [score_entry_to_dict(user.id, s) for s in user.scores],
            )
        if user.favourites:
            await self.session.execute(
                user_favourites_table.insert(),
                [favourite_entry_to_dict(user.id, f) for f in user.favourites],
            )

    async def append_score(
        self, user_id: UserId, entry: ScoreEntry, diamonds_earned: int
    ) -> Optional[int]:
        """Credit diamonds and append the score in the current transaction."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(diamonds=users_table.c.diamonds + diamonds_earned)
            .returning(users_table.c.diamonds)
        )
        result = await self.session.execute(stmt)
        total = result.scalar_one_or_none()
        if total is None:
            return None

        await self.session.execute(
            user_scores_table.insert().values(**score_entry_to_dict(user_id, entry))
        )
        await self.session.flush()
        return total

    async def add_favourite(self, user_id: UserId, entry: FavouriteEntry) -> None:
        """Insert a favourite.

        Raises:
            DuplicateKeyError: If a partial unique index rejects the entry
        """
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    user_favourites_table.insert().values(
                        **favourite_entry_to_dict(user_id, entry)
                    )
                )
        except IntegrityError as e:
            raise DuplicateKeyError("Favourite already exists") from e

    async def remove_favourites(self, user_id: UserId, key: str) -> int:
        """Delete favourites matching ``key`` in a single statement."""
        fav = user_favourites_table.c
        stmt = delete(user_favourites_table).where(
            fav.user_id == user_id,
            or_(
                fav.external_id == key,
                and_(fav.external_id.is_(None), fav.question == key),
            ),
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def clear_favourites(self, user_id: UserId) -> None:
        """Delete all of a user's favourites in a single statement."""
        await self.session.execute(
            delete(user_favourites_table).where(
                user_favourites_table.c.user_id == user_id
            )
        )
        await self.session.flush()
