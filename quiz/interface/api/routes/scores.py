"""Score and diamond routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import StrictInt

from quiz.application.usecase.common import CamelModel
from quiz.application.usecase.score import (
    GetDiamondsRequest,
    GetDiamondsResponse,
    GetDiamondsUseCase,
    GetScoresRequest,
    GetScoresResponse,
    GetScoresUseCase,
    SubmitScoreRequest,
    SubmitScoreResponse,
    SubmitScoreUseCase,
)
from quiz.domain.error import NotFoundError, ValidationError
from quiz.domain.service import JWTService
from quiz.interface.api.bearer import authenticate, user_not_found

router = APIRouter(prefix="/api/scores", tags=["scores"], route_class=DishkaRoute)


class SubmitScoreBody(CamelModel):
    """Submit score request body (``{score, category, correctAnswers?}``)."""

    score: StrictInt | None = None
    category: str | None = None
    correct_answers: StrictInt | None = None


@router.get("", response_model=GetScoresResponse)
async def get_scores(
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[GetScoresUseCase],
    authorization: str | None = Header(default=None),
) -> GetScoresResponse:
    """List the caller's score history, oldest first, with their balance."""
    user_id = authenticate(authorization, jwt_service)
    try:
        return await use_case.execute(GetScoresRequest(user_id=str(user_id)))
    except NotFoundError as e:
        raise user_not_found(e)


@router.post(
    "", response_model=SubmitScoreResponse, status_code=status.HTTP_201_CREATED
)
async def submit_score(
    body: SubmitScoreBody,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[SubmitScoreUseCase],
    authorization: str | None = Header(default=None),
) -> SubmitScoreResponse:
    """Record a quiz result and credit diamonds for correct answers.

    Example:
        POST /api/scores
        {"score": 7, "category": "math", "correctAnswers": 3}

    Raises:
        HTTPException: 400 if score or category is missing, 404 if the user is gone
    """
    user_id = authenticate(authorization, jwt_service)
    try:
        return await use_case.execute(
            SubmitScoreRequest(
                user_id=str(user_id),
                score=body.score,
                category=body.category,
                correct_answers=body.correct_answers,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise user_not_found(e)


@router.get("/diamonds", response_model=GetDiamondsResponse)
async def get_diamonds(
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[GetDiamondsUseCase],
    authorization: str | None = Header(default=None),
) -> GetDiamondsResponse:
    """Return the caller's diamond balance."""
    user_id = authenticate(authorization, jwt_service)
    try:
        return await use_case.execute(GetDiamondsRequest(user_id=str(user_id)))
    except NotFoundError as e:
        raise user_not_found(e)
