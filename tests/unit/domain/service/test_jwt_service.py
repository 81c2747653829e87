"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from tour.config import AuthSettings
from tour.domain.service import JWTService
from tour.util.jwt import JWTError


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestJWTService:
    """Tests for session token round trips and failures."""

    def test_token_carries_user(self, jwt_service):
        token = jwt_service.create_token("user-1", "guest@example.com")

        payload = jwt_service.verify_token(token)

        assert payload.user_id == "user-1"
        assert payload.email == "guest@example.com"

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token("user-1", "guest@example.com")

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(token)

    def test_expired_token_is_rejected(self):
        service = JWTService(AuthSettings(jwt_secret="s", jwt_expiry_days=-1))
        token = service.create_token("user-1", "guest@example.com")

        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_get_user_id_from_bad_token_is_none(self, jwt_service, token):
        assert jwt_service.get_user_id_from_token(token) is None

    def test_token_from_other_issuer_is_rejected(self, jwt_service):
        token = jwt.encode(
            {
                "sub": "user-1",
                "email": "guest@example.com",
                "iss": "elsewhere",
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            },
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(token)
