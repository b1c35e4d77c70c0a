"""Domain value objects for the quiz backend.

Score and favourite entries have no identity of their own; they only exist
inside the User aggregate that owns them.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from quiz.domain.value.common import ValueObject


# Range of the int4 columns holding quiz results
MIN_SCORE = -(2**31)
MAX_SCORE = 2**31 - 1
MAX_CORRECT_ANSWERS = 2**31 - 1


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class ScoreEntry(ValueObject):
    """A single submitted quiz result."""

    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    category: str = Field(min_length=1)
    correct_answers: int = Field(default=0, ge=0, le=MAX_CORRECT_ANSWERS)
    recorded_at: datetime = Field(default_factory=utcnow)


class FavouriteEntry(ValueObject):
    """A quiz question bookmarked by the user.

    ``external_id`` is the client's own question identifier, if it has one.
    """

    question: str = Field(min_length=1)
    options: list[str] = Field(default_factory=list)
    answer: str = Field(min_length=1)
    external_id: Optional[str] = None
    added_at: datetime = Field(default_factory=utcnow)

    def is_duplicate_of(self, question: str, external_id: Optional[str]) -> bool:
        """Check whether an incoming favourite collides with this entry.

        Incoming items carrying an external id are compared by external id;
        items without one are compared by question text.
        """
        if external_id is not None:
            return self.external_id == external_id
        return self.question == question

    def matches_key(self, key: str) -> bool:
        """Check whether this entry is addressed by a removal key."""
        if self.external_id is not None:
            return self.external_id == key
        return self.question == key
