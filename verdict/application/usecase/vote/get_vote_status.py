"""Get vote status use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from verdict.application.access import VoteAccessPolicy
from verdict.application.serializer import VoteCountsData
from verdict.application.usecase.base import VotableUseCase
from verdict.domain.service import EntityRegistry, VotableService
from verdict.domain.value import VoteType


class GetVoteStatusRequest(BaseModel):
    """Vote status request."""

    votable_type: str
    votable_id: str
    voter: Any = None  # Authenticated voter entity, if any


class GetVoteStatusResponse(BaseModel):
    """Vote status of one voter on one votable, with the votable's counts."""

    voted: bool
    vote_type: VoteType | None = None
    comment: str | None = None
    feedback_tags: list[str] = []
    vote_counts: VoteCountsData


class GetVoteStatusUseCase(VotableUseCase):
    """Use case for reading a voter's vote and the votable's counts."""

    def __init__(
        self,
        entity_registry: EntityRegistry,
        votable_service: VotableService,
        access_policy: VoteAccessPolicy,
    ) -> None:
        """Initialize get vote status use case.

        Args:
            entity_registry: Resolves the addressed votable
            votable_service: Votable capability service
            access_policy: Authorization policy
        """
        super().__init__(entity_registry)
        self.votable_service = votable_service
        self.access_policy = access_policy

    async def execute(self, request: GetVoteStatusRequest) -> GetVoteStatusResponse:
        """Execute get vote status flow.

        An anonymous request (authentication disabled) gets counts only.

        Args:
            request: Vote status request

        Returns:
            Vote status response
        """
        with logfire.span(
            "get_vote_status.execute",
            votable_type=request.votable_type,
            votable_id=request.votable_id,
        ):
            votable = await self.load_votable(request.votable_type, request.votable_id)
            await self.access_policy.check(votable, request.voter)

            counts = await self.votable_service.votes_summary(votable)
            vote = None
            if request.voter is not None:
                vote = await self.votable_service.vote_by(votable, request.voter)

            return GetVoteStatusResponse(
                voted=vote is not None,
                vote_type=vote.vote_type if vote else None,
                comment=vote.comment if vote else None,
                feedback_tags=list(vote.feedback_tags) if vote else [],
                vote_counts=VoteCountsData.from_counts(counts),
            )
