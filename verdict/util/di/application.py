"""Application layer DI providers."""

from dishka import Scope, provide

from verdict.application.access import (
    AllowAllAuthorizer,
    VoteAccessPolicy,
    VoteAuthorizer,
)
from verdict.application.serializer import VoteSerializer
from verdict.application.usecase.vote import (
    CastVoteUseCase,
    GetVoteStatusUseCase,
    ListFeedbackTagsUseCase,
    ListVotesUseCase,
    RemoveVoteUseCase,
)
from verdict.config import APISettings
from verdict.domain.service import (
    EntityRegistry,
    FeedbackCatalog,
    VotableService,
    VoteQueryService,
)
from verdict.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    The authorizer and vote serializer are host policy: override them by
    passing a provider for `VoteAuthorizer` or `VoteSerializer` to
    `create_container`.
    """

    @provide(scope=Scope.APP)
    def get_vote_authorizer(self) -> VoteAuthorizer:
        """Provide the default authorizer (allows everything)."""
        return AllowAllAuthorizer()

    @provide(scope=Scope.APP)
    def get_vote_serializer(self) -> VoteSerializer:
        """Provide vote serializer with the default voter rendering."""
        return VoteSerializer()

    @provide(scope=Scope.REQUEST)
    def get_vote_access_policy(
        self, authorizer: VoteAuthorizer, api_settings: APISettings
    ) -> VoteAccessPolicy:
        """Provide vote access policy."""
        return VoteAccessPolicy(authorizer=authorizer, api_settings=api_settings)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        entity_registry: EntityRegistry,
        votable_service: VotableService,
        access_policy: VoteAccessPolicy,
        vote_serializer: VoteSerializer,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            entity_registry=entity_registry,
            votable_service=votable_service,
            access_policy=access_policy,
            vote_serializer=vote_serializer,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(
        self,
        entity_registry: EntityRegistry,
        votable_service: VotableService,
        access_policy: VoteAccessPolicy,
    ) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(
            entity_registry=entity_registry,
            votable_service=votable_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_vote_status_use_case(
        self,
        entity_registry: EntityRegistry,
        votable_service: VotableService,
        access_policy: VoteAccessPolicy,
    ) -> GetVoteStatusUseCase:
        """Provide get vote status use case."""
        return GetVoteStatusUseCase(
            entity_registry=entity_registry,
            votable_service=votable_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_votes_use_case(
        self,
        entity_registry: EntityRegistry,
        votable_service: VotableService,
        vote_query_service: VoteQueryService,
        access_policy: VoteAccessPolicy,
        vote_serializer: VoteSerializer,
    ) -> ListVotesUseCase:
        """Provide list votes use case."""
        return ListVotesUseCase(
            entity_registry=entity_registry,
            votable_service=votable_service,
            vote_query_service=vote_query_service,
            access_policy=access_policy,
            vote_serializer=vote_serializer,
        )

    # Feedback tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_feedback_tags_use_case(
        self, feedback_catalog: FeedbackCatalog
    ) -> ListFeedbackTagsUseCase:
        """Provide list feedback tags use case."""
        return ListFeedbackTagsUseCase(feedback_catalog=feedback_catalog)
