"""Interface layer DI providers."""

from dishka import Scope, provide

from verdict.config import AuthSettings
from verdict.domain.service import EntityRegistry, JWTService
from verdict.interface.api.auth import JWTVoterAuthenticator, VoterAuthenticator
from verdict.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """Production HTTP interface provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_voter_authenticator(
        self,
        jwt_service: JWTService,
        entity_registry: EntityRegistry,
        auth_settings: AuthSettings,
    ) -> VoterAuthenticator:
        """Provide the default JWT voter authenticator."""
        return JWTVoterAuthenticator(
            jwt_service=jwt_service,
            entity_registry=entity_registry,
            auth_settings=auth_settings,
        )
