"""Async PostgreSQL engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from quiz.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async engine for the configured database.

    Args:
        database: Database settings (URL and pool sizing)
        echo: Log every SQL statement

    Returns:
        Async engine backed by asyncpg
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Repositories issue Core statements and map rows themselves, so loaded
    state never needs refreshing after commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
