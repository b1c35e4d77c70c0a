"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic objects, so rows are mapped by hand
instead of through the ORM.
"""

from typing import Any, Dict, Iterable, Mapping
from uuid import UUID

from quiz.domain.model import User
from quiz.domain.value import FavouriteEntry, ScoreEntry, UserId


def row_to_score_entry(row: Mapping[str, Any]) -> ScoreEntry:
    """Convert a user_scores row to a ScoreEntry."""
    return ScoreEntry(
        score=row["score"],
        category=row["category"],
        correct_answers=row["correct_answers"],
        recorded_at=row["recorded_at"],
    )


def row_to_favourite_entry(row: Mapping[str, Any]) -> FavouriteEntry:
    """Convert a user_favourites row to a FavouriteEntry."""
    return FavouriteEntry(
        question=row["question"],
        options=list(row["options"] or []),
        answer=row["answer"],
        external_id=row.get("external_id"),
        added_at=row["added_at"],
    )


def row_to_user(
    row: Mapping[str, Any],
    score_rows: Iterable[Mapping[str, Any]] = (),
    favourite_rows: Iterable[Mapping[str, Any]] = (),
) -> User:
    """Convert database rows to the User aggregate.

    Args:
        row: users row
        score_rows: user_scores rows, in insertion order
        favourite_rows: user_favourites rows, in insertion order

    Returns:
        User domain model
    """
    return User(
        id=UserId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        email=row["email"],
        full_name=row["full_name"],
        password_hash=row["password_hash"],
        scores=[row_to_score_entry(r) for r in score_rows],
        favourites=[row_to_favourite_entry(r) for r in favourite_rows],
        diamonds=row["diamonds"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User to a users row (sub-collections excluded).

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump(exclude={"scores", "favourites"})


def score_entry_to_dict(user_id: UserId, entry: ScoreEntry) -> Dict[str, Any]:
    """Convert a ScoreEntry to a user_scores row."""
    return {"user_id": user_id, **entry.model_dump()}


def favourite_entry_to_dict(user_id: UserId, entry: FavouriteEntry) -> Dict[str, Any]:
    """Convert a FavouriteEntry to a user_favourites row."""
    return {"user_id": user_id, **entry.model_dump()}
