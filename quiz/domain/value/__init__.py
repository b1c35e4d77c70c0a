"""Domain value objects for the quiz backend."""

from quiz.domain.value.identifiers import UserId
from quiz.domain.value.types import (
    MAX_CORRECT_ANSWERS,
    MAX_SCORE,
    MIN_SCORE,
    FavouriteEntry,
    ScoreEntry,
    utcnow,
)

__all__ = [
    "MAX_CORRECT_ANSWERS",
    "MAX_SCORE",
    "MIN_SCORE",
    "UserId",
    "ScoreEntry",
    "FavouriteEntry",
    "utcnow",
]
