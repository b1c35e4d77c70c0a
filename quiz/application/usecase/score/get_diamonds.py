"""Get diamond balance use case."""

from uuid import UUID

from pydantic import BaseModel

from quiz.application.usecase.base import BaseUseCase
from quiz.application.usecase.common import CamelModel
from quiz.domain.service import ScoreService
from quiz.domain.value import UserId


class GetDiamondsRequest(BaseModel):
    """Get diamonds request."""

    user_id: str


class GetDiamondsResponse(CamelModel):
    """Get diamonds response."""

    success: bool = True
    diamonds: int


class GetDiamondsUseCase(BaseUseCase):
    """Use case for reading a user's diamond balance."""

    def __init__(self, score_service: ScoreService) -> None:
        self.score_service = score_service

    async def execute(self, request: GetDiamondsRequest) -> GetDiamondsResponse:
        diamonds = await self.score_service.get_diamond_balance(
            UserId(UUID(request.user_id))
        )
        return GetDiamondsResponse(diamonds=diamonds)
