"""Unit tests for score use cases."""

from dishka import AsyncContainer
import pytest

from quiz.application.usecase.auth import SignupRequest, SignupUseCase
from quiz.application.usecase.score import (
    GetDiamondsRequest,
    GetDiamondsUseCase,
    GetScoresRequest,
    GetScoresUseCase,
    SubmitScoreRequest,
    SubmitScoreUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def signup(container: AsyncContainer) -> str:
    use_case = await container.get(SignupUseCase)
    response = await use_case.execute(
        SignupRequest(email="ada@example.com", full_name="Ada", password="pw123")
    )
    return response.user.id


class TestScoreUseCases:
    """Tests for submit/get scores and diamonds."""

    @pytest.mark.asyncio
    async def test_submit_then_list(self, unit_env: AsyncContainer):
        # Arrange
        user_id = await signup(unit_env)
        submit = await unit_env.get(SubmitScoreUseCase)
        get_scores = await unit_env.get(GetScoresUseCase)
        get_diamonds = await unit_env.get(GetDiamondsUseCase)

        # Act
        submitted = await submit.execute(
            SubmitScoreRequest(
                user_id=user_id, score=7, category="math", correct_answers=3
            )
        )
        scores = await get_scores.execute(GetScoresRequest(user_id=user_id))
        diamonds = await get_diamonds.execute(GetDiamondsRequest(user_id=user_id))

        # Assert
        assert submitted.diamonds_earned == 15
        assert submitted.total_diamonds == 15
        assert submitted.score.category == "math"
        assert len(scores.scores) == 1
        assert scores.scores[0].score == 7
        assert scores.scores[0].correct_answers == 3
        assert scores.diamonds == 15
        assert diamonds.diamonds == 15

    @pytest.mark.asyncio
    async def test_submit_response_is_camel_case(self, unit_env: AsyncContainer):
        user_id = await signup(unit_env)
        submit = await unit_env.get(SubmitScoreUseCase)

        response = await submit.execute(
            SubmitScoreRequest(user_id=user_id, score=3, category="art")
        )
        data = response.model_dump(by_alias=True)

        assert data["diamondsEarned"] == 0
        assert data["totalDiamonds"] == 0
        assert data["score"]["correctAnswers"] == 0
