"""Scores and rewards domain service."""

from dataclasses import dataclass

import logfire

from quiz.config import RewardSettings
from quiz.domain.error import NotFoundError, ValidationError
from quiz.domain.repository import UserRepository
from quiz.domain.value import (
    MAX_CORRECT_ANSWERS,
    MAX_SCORE,
    MIN_SCORE,
    ScoreEntry,
    UserId,
    utcnow,
)

from .base import Service
from .user_service import UserService


@dataclass
class ScoreSubmission:
    """Result of submitting a quiz score."""

    entry: ScoreEntry
    diamonds_earned: int
    total_diamonds: int


@dataclass
class ScoreHistory:
    """A user's score history with their current balance."""

    scores: list[ScoreEntry]
    diamonds: int


class ScoreService(Service):
    """Domain service for quiz scores and the diamond balance."""

    def __init__(
        self,
        user_repository: UserRepository,
        user_service: UserService,
        reward_settings: RewardSettings,
    ) -> None:
        """Initialize score service.

        Args:
            user_repository: User repository
            user_service: User domain service
            reward_settings: Reward configuration
        """
        self.user_repository = user_repository
        self.user_service = user_service
        self.reward_settings = reward_settings

    def diamonds_for(self, correct_answers: int) -> int:
        """Diamonds earned for a quiz with ``correct_answers`` right answers."""
        return self.reward_settings.diamonds_per_correct_answer * correct_answers

    async def submit_score(
        self,
        user_id: UserId,
        score: int | None,
        category: str | None,
        correct_answers: int | None = None,
    ) -> ScoreSubmission:
        """Record a quiz result and credit the diamonds it earned.

        The append and the balance increment happen in the store as single
        statements, so simultaneous submissions both count.

        Args:
            user_id: User ID
            score: Quiz score
            category: Quiz category
            correct_answers: Number of correct answers (defaults to 0)

        Returns:
            Saved entry, diamonds earned and the new balance

        Raises:
            ValidationError: If score or category is missing, or a count is out of range
            NotFoundError: If user not found
        """
        with logfire.span("score_service.submit_score", user_id=str(user_id)):
            if score is None or not category:
                raise ValidationError("Score and category are required")
            if correct_answers is None:
                correct_answers = 0
            if correct_answers < 0:
                raise ValidationError("correctAnswers must not be negative")
            if not MIN_SCORE <= score <= MAX_SCORE:
                raise ValidationError("score is out of range")
            if correct_answers > MAX_CORRECT_ANSWERS:
                raise ValidationError("correctAnswers is out of range")

            entry = ScoreEntry(
                score=score,
                category=category,
                correct_answers=correct_answers,
                recorded_at=utcnow(),
            )
            diamonds_earned = self.diamonds_for(correct_answers)

            total = await self.user_repository.append_score(
                user_id, entry, diamonds_earned
            )
            if total is None:
                logfire.warn("Score for unknown user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info(
                "Score saved",
                user_id=str(user_id),
                category=category,
                diamonds_earned=diamonds_earned,
                total_diamonds=total,
            )
            return ScoreSubmission(
                entry=entry, diamonds_earned=diamonds_earned, total_diamonds=total
            )

    async def list_scores(self, user_id: UserId) -> ScoreHistory:
        """Get a user's scores in submission order, with their balance.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(user_id)
        return ScoreHistory(scores=list(user.scores), diamonds=user.diamonds)

    async def get_diamond_balance(self, user_id: UserId) -> int:
        """Get a user's diamond balance.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(user_id)
        return user.diamonds
