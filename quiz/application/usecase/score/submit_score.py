"""Submit score use case."""

from uuid import UUID

from pydantic import BaseModel

from quiz.application.usecase.base import BaseUseCase
from quiz.application.usecase.common import CamelModel, ScoreInfo
from quiz.domain.service import ScoreService
from quiz.domain.value import UserId


class SubmitScoreRequest(BaseModel):
    """Submit score request."""

    user_id: str  # User ID from authenticated user
    score: int | None = None
    category: str | None = None
    correct_answers: int | None = None


class SubmitScoreResponse(CamelModel):
    """Submit score response."""

    success: bool = True
    message: str = "Score saved successfully"
    score: ScoreInfo
    diamonds_earned: int
    total_diamonds: int


class SubmitScoreUseCase(BaseUseCase):
    """Use case for recording a quiz result."""

    def __init__(self, score_service: ScoreService) -> None:
        """Initialize submit score use case.

        Args:
            score_service: Score domain service
        """
        self.score_service = score_service

    async def execute(self, request: SubmitScoreRequest) -> SubmitScoreResponse:
        """Execute submit score flow.

        Raises:
            ValidationError: If score or category is missing
            NotFoundError: If user not found
        """
        submission = await self.score_service.submit_score(
            UserId(UUID(request.user_id)),
            score=request.score,
            category=request.category,
            correct_answers=request.correct_answers,
        )
        return SubmitScoreResponse(
            score=ScoreInfo.from_entry(submission.entry),
            diamonds_earned=submission.diamonds_earned,
            total_diamonds=submission.total_diamonds,
        )
