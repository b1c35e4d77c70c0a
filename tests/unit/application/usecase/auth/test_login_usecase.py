"""Unit tests for LoginUseCase."""

from dishka import AsyncContainer
import pytest

from quiz.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from quiz.domain.error import InvalidCredentialsError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_after_signup(self, unit_env: AsyncContainer):
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        login = await unit_env.get(LoginUseCase)
        created = await signup.execute(
            SignupRequest(email="ada@example.com", full_name="Ada", password="pw123")
        )

        # Act
        response = await login.execute(
            LoginRequest(email="ada@example.com", password="pw123")
        )

        # Assert
        assert response.message == "Login successful"
        assert response.user.id == created.user.id
        assert response.token

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env: AsyncContainer):
        signup = await unit_env.get(SignupUseCase)
        login = await unit_env.get(LoginUseCase)
        await signup.execute(
            SignupRequest(email="ada@example.com", full_name="Ada", password="pw123")
        )

        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(email="ada@example.com", password="nope"))
