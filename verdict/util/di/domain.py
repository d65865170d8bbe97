"""Domain layer DI providers."""

from dishka import Scope, provide

from verdict.config import AuthSettings, Settings
from verdict.domain.repository import VoteRepository
from verdict.domain.service import (
    EntityRegistry,
    FeedbackCatalog,
    JWTService,
    VotableService,
    VoteQueryService,
    VoteService,
    VoteValidator,
    VoterService,
)
from verdict.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The feedback catalog is APP-scoped: it is shared, mutable configuration.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_feedback_catalog(self, settings: Settings) -> FeedbackCatalog:
        """Provide the live feedback catalog, seeded from settings."""
        return FeedbackCatalog(settings.feedback.tags)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_vote_validator(
        self, vote_repository: VoteRepository, feedback_catalog: FeedbackCatalog
    ) -> VoteValidator:
        """Provide vote validator."""
        return VoteValidator(
            vote_repository=vote_repository, feedback_catalog=feedback_catalog
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, vote_validator: VoteValidator
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, vote_validator=vote_validator
        )

    @provide
    def get_vote_query_service(
        self, vote_repository: VoteRepository
    ) -> VoteQueryService:
        """Provide vote aggregation service."""
        return VoteQueryService(vote_repository=vote_repository)

    @provide
    def get_votable_service(
        self,
        vote_service: VoteService,
        vote_query_service: VoteQueryService,
        entity_registry: EntityRegistry,
    ) -> VotableService:
        """Provide votable capability service."""
        return VotableService(
            vote_service=vote_service,
            vote_query_service=vote_query_service,
            entity_registry=entity_registry,
        )

    @provide
    def get_voter_service(
        self,
        votable_service: VotableService,
        vote_query_service: VoteQueryService,
        entity_registry: EntityRegistry,
    ) -> VoterService:
        """Provide voter capability service."""
        return VoterService(
            votable_service=votable_service,
            vote_query_service=vote_query_service,
            entity_registry=entity_registry,
        )
