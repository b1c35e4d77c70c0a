"""Response models shared by several use cases.

The mobile client speaks camelCase JSON, so outward-facing models serialize
with camelCase aliases while keeping snake_case attributes in Python.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quiz.domain.model import User
from quiz.domain.value import FavouriteEntry, ScoreEntry


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreInfo(CamelModel):
    """Score entry as returned to clients."""

    score: int
    category: str
    correct_answers: int
    recorded_at: datetime

    @classmethod
    def from_entry(cls, entry: ScoreEntry) -> "ScoreInfo":
        return cls(
            score=entry.score,
            category=entry.category,
            correct_answers=entry.correct_answers,
            recorded_at=entry.recorded_at,
        )


class FavouriteInfo(CamelModel):
    """Favourite entry as returned to clients.

    The external id goes back out under ``id``, the key it was submitted with.
    """

    question: str
    options: list[str]
    answer: str
    external_id: str | None = Field(default=None, alias="id")
    added_at: datetime

    @classmethod
    def from_entry(cls, entry: FavouriteEntry) -> "FavouriteInfo":
        return cls(
            question=entry.question,
            options=list(entry.options),
            answer=entry.answer,
            external_id=entry.external_id,
            added_at=entry.added_at,
        )


class UserProfile(CamelModel):
    """Public view of a user; never includes the password hash."""

    id: str
    email: str
    full_name: str
    scores: list[ScoreInfo]
    diamonds: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            email=user.email,
            full_name=user.full_name,
            scores=[ScoreInfo.from_entry(s) for s in user.scores],
            diamonds=user.diamonds,
            created_at=user.created_at,
        )
