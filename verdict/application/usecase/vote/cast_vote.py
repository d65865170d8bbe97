"""Cast vote use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from verdict.application.access import VoteAccessPolicy
from verdict.application.serializer import VoteData, VoteSerializer
from verdict.application.usecase.base import VotableUseCase
from verdict.domain.error import (
    NotAuthenticatedError,
    NotAuthorizedError,
    VoteRejectedError,
)
from verdict.domain.service import EntityRegistry, VotableService
from verdict.domain.value import VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: str
    votable_id: str
    vote_type: VoteType
    voter: Any = None  # Authenticated voter entity
    comment: str | None = None
    feedback_tags: list[str] | None = None


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote: VoteData
    created: bool


class CastVoteUseCase(VotableUseCase):
    """Use case for up or down voting any votable."""

    def __init__(
        self,
        entity_registry: EntityRegistry,
        votable_service: VotableService,
        access_policy: VoteAccessPolicy,
        vote_serializer: VoteSerializer,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            entity_registry: Resolves the addressed votable
            votable_service: Votable capability service
            access_policy: Authorization policy
            vote_serializer: Renders the resulting vote
        """
        super().__init__(entity_registry)
        self.votable_service = votable_service
        self.access_policy = access_policy
        self.vote_serializer = vote_serializer

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The vote as stored

        Raises:
            NotAuthenticatedError: If there is no voter
            UnknownEntityTypeError: If the votable type is not registered
            NotFoundError: If the votable does not exist
            NotAuthorizedError: If the voter may not vote on the votable
            VoteRejectedError: If the vote fails validation
        """
        with logfire.span(
            "cast_vote.execute",
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            vote_type=request.vote_type.value,
        ):
            if request.voter is None:
                raise NotAuthenticatedError("Authentication required to vote")

            votable = await self.load_votable(request.votable_type, request.votable_id)
            await self.access_policy.check(votable, request.voter)

            result = await self.votable_service.vote_for(
                votable,
                request.voter,
                request.vote_type.direction,
                comment=request.comment,
                feedback_tags=request.feedback_tags,
            )

            if result is False:
                raise NotAuthorizedError(
                    f"{request.votable_type}:{request.votable_id}",
                    type(request.voter).__name__,
                )

            if not result.ok:
                raise VoteRejectedError(result.errors)

            return CastVoteResponse(
                vote=self.vote_serializer.serialize(result.vote),
                created=result.created,
            )
