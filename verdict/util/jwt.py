"""JWT token utilities for identifying voters."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from verdict.config import AuthSettings
from verdict.domain.value import EntityRef


class TokenPayload(BaseModel):
    """JWT token payload.

    `sub` carries the voter id as a string, `voter_type` its entity type.
    """

    sub: str
    voter_type: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(voter: EntityRef, settings: AuthSettings) -> str:
    """Create a JWT token for a voter.

    Args:
        voter: Reference to the voter
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": str(voter.id),
        "voter_type": voter.type,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
