"""List votes use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from verdict.application.access import VoteAccessPolicy
from verdict.application.serializer import VoteCountsData, VoteData, VoteSerializer
from verdict.application.usecase.base import VotableUseCase
from verdict.domain.service import EntityRegistry, VotableService, VoteQueryService
from verdict.domain.model.capability import votable_ref


class ListVotesRequest(BaseModel):
    """List votes request."""

    votable_type: str
    votable_id: str
    vote_type: str | None = None  # "up", "down" or None for both
    with_comments: bool = False
    voter: Any = None  # Authenticated voter entity, if any


class ListVotesResponse(BaseModel):
    """List votes response."""

    votes: list[VoteData]
    summary: VoteCountsData


class ListVotesUseCase(VotableUseCase):
    """Use case for listing the votes on a votable."""

    def __init__(
        self,
        entity_registry: EntityRegistry,
        votable_service: VotableService,
        vote_query_service: VoteQueryService,
        access_policy: VoteAccessPolicy,
        vote_serializer: VoteSerializer,
    ) -> None:
        """Initialize list votes use case.

        Args:
            entity_registry: Resolves the addressed votable
            votable_service: Votable capability service
            vote_query_service: Filtered vote listings
            access_policy: Authorization policy
            vote_serializer: Renders votes
        """
        super().__init__(entity_registry)
        self.votable_service = votable_service
        self.vote_query_service = vote_query_service
        self.access_policy = access_policy
        self.vote_serializer = vote_serializer

    async def execute(self, request: ListVotesRequest) -> ListVotesResponse:
        """Execute list votes flow.

        Unrecognised `vote_type` values are ignored, listing both directions.

        Args:
            request: List votes request

        Returns:
            Matching votes, oldest first, and the votable's counts
        """
        with logfire.span(
            "list_votes.execute",
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            vote_type=request.vote_type,
            with_comments=request.with_comments,
        ):
            votable = await self.load_votable(request.votable_type, request.votable_id)
            await self.access_policy.check(votable, request.voter)

            direction = {"up": True, "down": False}.get(request.vote_type or "")
            votes = await self.vote_query_service.list_votes(
                votable_ref(votable),
                direction=direction,
                with_comments=request.with_comments,
            )
            counts = await self.votable_service.votes_summary(votable)

            logfire.info("Votes listed", count=len(votes))

            return ListVotesResponse(
                votes=self.vote_serializer.serialize_many(votes),
                summary=VoteCountsData.from_counts(counts),
            )
