"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from pharmqa.config import Settings
from pharmqa.domain.service import JWTService


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(Settings().auth)


class TestGetUserIdFromToken:
    """Resolving the current user from a session token."""

    def test_valid_token_resolves_to_uuid(self, jwt_service):
        user_id = uuid4()
        token = jwt_service.create_token(str(user_id), f"idp|{user_id}")

        assert jwt_service.get_user_id_from_token(token) == user_id

    @pytest.mark.parametrize("token", [None, "", "not.a.jwt"])
    def test_missing_or_invalid_token_is_anonymous(self, jwt_service, token):
        assert jwt_service.get_user_id_from_token(token) is None

    @pytest.mark.parametrize("raw_user_id", ["not-a-uuid", "42", ""])
    def test_signed_token_with_malformed_user_id_is_anonymous(
        self, jwt_service, raw_user_id
    ):
        token = jwt_service.create_token(raw_user_id, "idp|someone")

        assert jwt_service.get_user_id_from_token(token) is None
