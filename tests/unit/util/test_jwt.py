"""Unit tests for JWT helpers and JWTService."""

from uuid import uuid4

import jwt
import pytest

from verdict.config import AuthSettings
from verdict.domain.service import JWTService
from verdict.domain.value import EntityRef
from verdict.util.jwt import JWTError, create_token, verify_token

SECRET = "test-secret-that-is-long-enough-for-hs256-signing"


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret=SECRET)


class TestTokens:
    """Tests for create_token / verify_token."""

    def test_round_trip_uuid_voter(self, auth_settings):
        """Claims carry the voter id and type."""
        voter = EntityRef(type="Account", id=uuid4())

        payload = verify_token(create_token(voter, auth_settings), auth_settings)

        assert payload.sub == str(voter.id)
        assert payload.voter_type == "Account"

    def test_wrong_secret_is_invalid(self, auth_settings):
        """Tokens signed with another key are rejected."""
        token = create_token(
            EntityRef(type="Account", id=1),
            AuthSettings(jwt_secret="another-secret-that-is-long-enough-too"),
        )

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, auth_settings)

    def test_expired_token(self, auth_settings):
        """Expiry is enforced."""
        token = create_token(
            EntityRef(type="Account", id=1),
            AuthSettings(jwt_secret=SECRET, jwt_expiry_days=-1),
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)

    def test_token_without_voter_type_is_invalid(self, auth_settings):
        """Tokens minted elsewhere without our claims are rejected."""
        token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")

        with pytest.raises(JWTError):
            verify_token(token, auth_settings)


class TestJWTService:
    """Tests for JWTService."""

    def test_voter_ref_from_token(self, auth_settings):
        """Integer ids come back as integers."""
        service = JWTService(auth_settings)
        token = service.create_token(EntityRef(type="ticket_owner", id=42))

        assert service.get_voter_ref_from_token(token) == EntityRef(
            type="ticket_owner", id=42
        )

    def test_missing_or_garbage_token_is_anonymous(self, auth_settings):
        """No exception escapes for bad tokens."""
        service = JWTService(auth_settings)

        assert service.get_voter_ref_from_token(None) is None
        assert service.get_voter_ref_from_token("") is None
        assert service.get_voter_ref_from_token("not.a.token") is None
