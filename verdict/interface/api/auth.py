"""Voter authentication for the HTTP API.

Hosts plug in their own scheme by providing a `VoterAuthenticator`. The
default one reads a JWT from the Authorization header or the auth cookie.
"""

from abc import ABC, abstractmethod
from typing import Any

import logfire
from fastapi import Request

from verdict.config import AuthSettings
from verdict.domain.error import NotFoundError, UnknownEntityTypeError
from verdict.domain.model.capability import voter_ref
from verdict.domain.service import EntityRegistry, JWTService


class VoterAuthenticator(ABC):
    """Turns an incoming request into the voter making it."""

    @abstractmethod
    async def authenticate(self, request: Request) -> Any | None:
        """Return the authenticated voter, or None for anonymous requests."""
        pass


class JWTVoterAuthenticator(VoterAuthenticator):
    """Authenticates voters from JWT bearer tokens."""

    def __init__(
        self,
        jwt_service: JWTService,
        entity_registry: EntityRegistry,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize JWT voter authenticator.

        Args:
            jwt_service: Verifies tokens
            entity_registry: Loads the voter named by the token claims
            auth_settings: Authentication settings (cookie name)
        """
        self.jwt_service = jwt_service
        self.entity_registry = entity_registry
        self.auth_settings = auth_settings

    def extract_token(self, request: Request) -> str | None:
        """Read the bearer token, preferring the Authorization header."""
        authorization = request.headers.get("authorization")
        if authorization:
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() == "bearer" and token.strip():
                return token.strip()
        return request.cookies.get(self.auth_settings.cookie_name)

    async def authenticate(self, request: Request) -> Any | None:
        """Resolve the voter named by the request's token.

        Returns:
            The voter entity, or None when the token is missing, invalid,
            names an unknown voter, or names something that cannot vote
        """
        ref = self.jwt_service.get_voter_ref_from_token(self.extract_token(request))
        if ref is None:
            return None

        try:
            voter = await self.entity_registry.resolve(ref)
        except (UnknownEntityTypeError, NotFoundError) as e:
            logfire.warn("Token names unknown voter", voter=str(ref), error=str(e))
            return None

        if voter_ref(voter) is None:
            logfire.warn("Token names an entity that cannot vote", voter=str(ref))
            return None

        return voter
