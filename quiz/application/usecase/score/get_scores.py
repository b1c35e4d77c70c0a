"""Get scores use case."""

from uuid import UUID

from pydantic import BaseModel

from quiz.application.usecase.base import BaseUseCase
from quiz.application.usecase.common import CamelModel, ScoreInfo
from quiz.domain.service import ScoreService
from quiz.domain.value import UserId


class GetScoresRequest(BaseModel):
    """Get scores request."""

    user_id: str


class GetScoresResponse(CamelModel):
    """Get scores response."""

    success: bool = True
    scores: list[ScoreInfo]
    diamonds: int


class GetScoresUseCase(BaseUseCase):
    """Use case for reading a user's score history."""

    def __init__(self, score_service: ScoreService) -> None:
        self.score_service = score_service

    async def execute(self, request: GetScoresRequest) -> GetScoresResponse:
        """Execute get scores flow.

        Raises:
            NotFoundError: If user not found
        """
        history = await self.score_service.list_scores(UserId(UUID(request.user_id)))
        return GetScoresResponse(
            scores=[ScoreInfo.from_entry(s) for s in history.scores],
            diamonds=history.diamonds,
        )
