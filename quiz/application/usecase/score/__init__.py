"""Score use cases."""

from .get_diamonds import GetDiamondsRequest, GetDiamondsResponse, GetDiamondsUseCase
from .get_scores import GetScoresRequest, GetScoresResponse, GetScoresUseCase
from .submit_score import SubmitScoreRequest, SubmitScoreResponse, SubmitScoreUseCase

__all__ = [
    "GetDiamondsRequest",
    "GetDiamondsResponse",
    "GetDiamondsUseCase",
    "GetScoresRequest",
    "GetScoresResponse",
    "GetScoresUseCase",
    "SubmitScoreRequest",
    "SubmitScoreResponse",
    "SubmitScoreUseCase",
]
