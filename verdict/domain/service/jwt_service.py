"""JWT token domain service."""

import logfire

from verdict.config import AuthSettings
from verdict.domain.value import EntityRef
from verdict.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for voter JWT tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, voter: EntityRef) -> str:
        """Create JWT token for a voter.

        Args:
            voter: Reference to the voter

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", voter=str(voter)):
            token = create_token(voter, self.auth_settings)
            logfire.info("JWT token created", voter=str(voter))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info(
                    "JWT token verified",
                    voter_id=payload.sub,
                    voter_type=payload.voter_type,
                )
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_voter_ref_from_token(self, token: str | None) -> EntityRef | None:
        """Extract the voter reference from a JWT token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Voter reference if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return EntityRef(type=payload.voter_type, id=payload.sub)
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
