"""Test configuration and fixtures."""

import os

# Test settings must be in place before anything reads Settings()
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-signing-key-for-the-quiz-suite-0123")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

import logfire  # noqa: E402
import pytest  # noqa: E402

from quiz.config import AuthSettings, RewardSettings  # noqa: E402

# Keep spans local; the app instruments FastAPI at import time
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed key and the cheapest bcrypt work factor."""
    return AuthSettings(
        jwt_secret="test-signing-key-for-the-quiz-suite-0123", bcrypt_rounds=4
    )


@pytest.fixture
def reward_settings() -> RewardSettings:
    return RewardSettings(diamonds_per_correct_answer=5)
