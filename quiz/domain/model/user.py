"""User aggregate root.

A user owns their quiz score history, their favourite questions and the
diamond balance earned from correct answers.
"""

from datetime import datetime

from pydantic import Field

from quiz.domain.model.common import DomainModel
from quiz.domain.value import FavouriteEntry, ScoreEntry, UserId, utcnow


class User(DomainModel):
    """User aggregate root.

    ``diamonds`` always equals the sum of diamonds earned over ``scores``;
    it is stored rather than recomputed on every read.
    """

    id: UserId
    email: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    password_hash: str = Field(repr=False)
    scores: list[ScoreEntry] = Field(default_factory=list)
    favourites: list[FavouriteEntry] = Field(default_factory=list)
    diamonds: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
