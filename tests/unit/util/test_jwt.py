"""Unit tests for JWT utilities."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from scribe.config import AuthSettings
from scribe.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret")


class TestVerifyToken:
    """Tests for verify_token."""

    def test_round_trip(self, auth_settings):
        user_id = uuid4()

        payload = verify_token(create_token(str(user_id), auth_settings), auth_settings)

        assert payload.user_id == user_id

    def test_wrong_secret(self, auth_settings):
        token = create_token(str(uuid4()), AuthSettings(jwt_secret="other"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, auth_settings)

    def test_expired(self, auth_settings):
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)

    def test_payload_without_user_id(self, auth_settings):
        """Signed tokens must still carry a UUID user_id."""
        token = jwt.encode(
            {
                "user_id": "not-a-uuid",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="payload"):
            verify_token(token, auth_settings)

    def test_garbage(self, auth_settings):
        with pytest.raises(JWTError):
            verify_token("not-a-token", auth_settings)
