"""Remove vote use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from verdict.application.access import VoteAccessPolicy
from verdict.application.usecase.base import VotableUseCase
from verdict.domain.error import NotAuthenticatedError
from verdict.domain.service import EntityRegistry, VotableService


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    votable_type: str
    votable_id: str
    voter: Any = None  # Authenticated voter entity


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    success: bool
    message: str


class RemoveVoteUseCase(VotableUseCase):
    """Use case for removing a vote from any votable."""

    def __init__(
        self,
        entity_registry: EntityRegistry,
        votable_service: VotableService,
        access_policy: VoteAccessPolicy,
    ) -> None:
        """Initialize remove vote use case.

        Args:
            entity_registry: Resolves the addressed votable
            votable_service: Votable capability service
            access_policy: Authorization policy
        """
        super().__init__(entity_registry)
        self.votable_service = votable_service
        self.access_policy = access_policy

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Args:
            request: Remove vote request

        Returns:
            Remove vote response

        Raises:
            NotAuthenticatedError: If there is no voter
            UnknownEntityTypeError: If the votable type is not registered
            NotFoundError: If the votable does not exist
            NotAuthorizedError: If the voter may not act on the votable
        """
        with logfire.span(
            "remove_vote.execute",
            votable_type=request.votable_type,
            votable_id=request.votable_id,
        ):
            if request.voter is None:
                raise NotAuthenticatedError("Authentication required to remove vote")

            votable = await self.load_votable(request.votable_type, request.votable_id)
            await self.access_policy.check(votable, request.voter)

            removed = await self.votable_service.remove_vote(votable, request.voter)

            if removed:
                return RemoveVoteResponse(
                    success=True,
                    message="Vote removed",
                )
            else:
                return RemoveVoteResponse(
                    success=False,
                    message="No vote found to remove",
                )
