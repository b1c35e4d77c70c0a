"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from quiz.config import AuthSettings
from quiz.domain.service import JWTService
from quiz.domain.value import UserId
from quiz.util.jwt import JWTError, create_token


class TestJWTService:
    """Tests for JWTService."""

    def test_token_resolves_to_user(self, auth_settings: AuthSettings):
        service = JWTService(auth_settings)
        user_id = UserId(uuid4())

        token = service.create_token(user_id)

        assert service.get_user_id_from_token(token) == user_id

    def test_verify_raises_on_bad_token(self, auth_settings: AuthSettings):
        service = JWTService(auth_settings)

        with pytest.raises(JWTError):
            service.verify_token("garbage")

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_get_user_id_never_raises(self, auth_settings: AuthSettings, token):
        service = JWTService(auth_settings)

        assert service.get_user_id_from_token(token) is None

    def test_non_uuid_subject_is_rejected(self, auth_settings: AuthSettings):
        """A validly signed token must still carry a user id we can resolve."""
        service = JWTService(auth_settings)
        token = create_token("not-a-uuid", auth_settings)

        assert service.get_user_id_from_token(token) is None
