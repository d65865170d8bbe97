"""Vote aggregation queries.

Counts and listings are always recomputed from the live vote rows.
"""

import logfire

from verdict.domain.model.vote import Vote
from verdict.domain.repository import VoteRepository
from verdict.domain.value import EntityId, EntityRef, VoteCounts

from .base import Service


class VoteQueryService(Service):
    """Read-side queries over the votes of one votable or one voter."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote query service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def get_vote(self, votable: EntityRef, voter: EntityRef) -> Vote | None:
        """Return the voter's vote on the votable, if any."""
        return await self.vote_repository.find_by_voter_and_votable(voter, votable)

    async def has_voted(
        self, votable: EntityRef, voter: EntityRef, direction: bool | None = None
    ) -> bool:
        """Whether the voter has voted on the votable (optionally in a direction)."""
        return await self.vote_repository.exists(voter, votable, direction)

    async def count(self, votable: EntityRef, direction: bool | None = None) -> int:
        """Count votes on a votable (optionally only one direction)."""
        return await self.vote_repository.count_by_votable(votable, direction)

    async def score(self, votable: EntityRef) -> int:
        """Up votes minus down votes; zero when there are no votes."""
        up = await self.count(votable, True)
        down = await self.count(votable, False)
        return up - down

    async def summarize(self, votable: EntityRef) -> VoteCounts:
        """Total, up and down counts for a votable."""
        with logfire.span("summarize_votes", votable=str(votable)):
            up = await self.count(votable, True)
            down = await self.count(votable, False)
            return VoteCounts(total=up + down, up=up, down=down)

    async def list_votes(
        self,
        votable: EntityRef,
        direction: bool | None = None,
        with_comments: bool = False,
    ) -> list[Vote]:
        """List votes on a votable, oldest first.

        Args:
            votable: Reference to the votable
            direction: Only up (True) or down (False) votes; None for both
            with_comments: Only votes with a non-empty comment

        Returns:
            Matching votes
        """
        return await self.vote_repository.find_by_votable(
            votable, direction=direction, with_comments=with_comments
        )

    async def list_voter_votes(
        self,
        voter: EntityRef,
        votable_type: str | None = None,
        direction: bool | None = None,
    ) -> list[Vote]:
        """List votes cast by a voter, oldest first."""
        return await self.vote_repository.find_by_voter(
            voter, votable_type=votable_type, direction=direction
        )

    async def voted_votable_ids(
        self,
        votable_type: str,
        direction: bool | None = None,
        with_comments: bool = False,
    ) -> list[EntityId]:
        """Distinct ids of votables of a type that have matching votes."""
        return await self.vote_repository.find_votable_ids(
            votable_type, direction=direction, with_comments=with_comments
        )
