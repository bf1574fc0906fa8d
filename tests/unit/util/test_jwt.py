"""Unit tests for JWT utilities."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt as pyjwt
import pytest

from votp.config import AuthSettings
from votp.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-0123456789abcdef0123")


class TestCreateToken:
    """Tests for create_token."""

    def test_round_trip_claims(self):
        # Arrange
        user_id = str(uuid4())

        # Act
        token = create_token(user_id, "reader@example.com", SETTINGS)
        payload = verify_token(token, SETTINGS)

        # Assert
        assert payload.user_id == user_id
        assert payload.email == "reader@example.com"

    def test_expiry_uses_configured_hours(self):
        token = create_token(str(uuid4()), "reader@example.com", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.exp - payload.iat == timedelta(hours=24)


class TestVerifyToken:
    """Tests for verify_token."""

    def test_expired_token_rejected(self):
        now = datetime.now(timezone.utc)
        token = pyjwt.encode(
            {
                "sub": str(uuid4()),
                "email": "reader@example.com",
                "iat": now - timedelta(hours=48),
                "exp": now - timedelta(hours=24),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_secret_rejected(self):
        other = AuthSettings(jwt_secret="another-secret-0123456789abcdef012345")
        token = create_token(str(uuid4()), "reader@example.com", other)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)

    def test_garbage_rejected(self):
        with pytest.raises(JWTError):
            verify_token("not-a-jwt", SETTINGS)

    def test_missing_claims_rejected(self):
        token = pyjwt.encode(
            {"sub": str(uuid4())},
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="payload"):
            verify_token(token, SETTINGS)
