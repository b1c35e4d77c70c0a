"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from quiz.config import DEFAULT_JWT_SECRET, AuthSettings, Settings
from quiz.util.error import ConfigurationError


class TestSettings:
    """Tests for Settings validation."""

    def test_nested_env_vars(self, monkeypatch):
        """Nested settings should load with the double underscore delimiter."""
        monkeypatch.setenv("REWARDS__DIAMONDS_PER_CORRECT_ANSWER", "10")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/x")

        settings = Settings()

        assert settings.rewards.diamonds_per_correct_answer == 10
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/x"

    def test_production_rejects_placeholder_secret(self):
        with pytest.raises(ValidationError, match="AUTH__JWT_SECRET"):
            Settings(
                environment="production",
                auth=AuthSettings(jwt_secret=DEFAULT_JWT_SECRET),
            )

    def test_production_accepts_real_secret(self):
        settings = Settings(
            environment="production",
            auth=AuthSettings(jwt_secret="a-real-production-signing-key-123456"),
        )

        assert settings.environment == "production"

    def test_empty_secret_rejected(self):
        with pytest.raises(ValidationError):
            AuthSettings(jwt_secret="")


class TestConfigurationError:
    """Tests for ConfigurationError.from_validation_error()."""

    def test_names_each_bad_field(self):
        with pytest.raises(ValidationError) as exc_info:
            AuthSettings(jwt_secret="", bcrypt_rounds=2)

        error = ConfigurationError.from_validation_error(exc_info.value)

        assert "jwt_secret" in str(error)
        assert "bcrypt_rounds" in str(error)
