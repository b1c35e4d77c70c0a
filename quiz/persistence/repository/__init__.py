"""PostgreSQL repository implementations."""

from quiz.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
]
