"""Voter capability domain service.

Mirrors `VotableService` from the voter's side. A None votable raises
InvalidArgumentError; an object that cannot receive votes makes the method
return False.
"""

from collections.abc import Iterable
from typing import Any, Literal

import logfire

from verdict.domain.error import InvalidArgumentError
from verdict.domain.model.capability import Votable, Voter, votable_ref, voter_ref
from verdict.domain.model.vote import Vote, VoteResult
from verdict.domain.value import EntityRef

from .base import Service
from .entity_registry import EntityRegistry
from .votable_service import VotableService
from .vote_query_service import VoteQueryService


def require_voter(voter: Any) -> EntityRef:
    """Reference of the voter a method was called for.

    Raises:
        InvalidArgumentError: If voter is None, not Voter, or unsaved
    """
    if voter is None:
        raise InvalidArgumentError("Voter cannot be None")
    ref = voter_ref(voter)
    if ref is None:
        raise InvalidArgumentError(f"{voter!r} is not a saved Voter")
    return ref


def can_receive_votes(votable: Any) -> bool:
    """Whether a votable argument has the capability.

    Raises:
        InvalidArgumentError: If votable is None
    """
    if votable is None:
        raise InvalidArgumentError("Votable cannot be None")
    if votable_ref(votable) is None:
        logfire.debug(
            "Object cannot receive votes", votable_class=type(votable).__name__
        )
        return False
    return True


class VoterService(Service):
    """Domain service implementing the voter side of voting."""

    def __init__(
        self,
        votable_service: VotableService,
        vote_query_service: VoteQueryService,
        entity_registry: EntityRegistry,
    ) -> None:
        """Initialize voter service.

        Args:
            votable_service: Votable side, which owns the write path
            vote_query_service: Vote aggregation queries
            entity_registry: Resolves votable references for listings
        """
        self.votable_service = votable_service
        self.vote_query_service = vote_query_service
        self.entity_registry = entity_registry

    async def vote_up_for(
        self,
        voter: Voter,
        votable: Any,
        comment: str | None = None,
        feedback_tags: Iterable[str] | None = None,
    ) -> VoteResult | Literal[False]:
        """Up vote `votable`; False if it cannot receive votes."""
        require_voter(voter)
        if not can_receive_votes(votable):
            return False
        return await self.votable_service.vote_up(votable, voter, comment, feedback_tags)

    async def vote_down_for(
        self,
        voter: Voter,
        votable: Any,
        comment: str | None = None,
        feedback_tags: Iterable[str] | None = None,
    ) -> VoteResult | Literal[False]:
        """Down vote `votable`; False if it cannot receive votes."""
        require_voter(voter)
        if not can_receive_votes(votable):
            return False
        return await self.votable_service.vote_down(
            votable, voter, comment, feedback_tags
        )

    async def remove_vote_for(self, voter: Voter, votable: Any) -> bool:
        """Remove the voter's vote on the votable.

        Args:
            voter: Voter whose vote is removed
            votable: Votable the vote was cast on

        Returns:
            True if a vote was removed; False if none existed or `votable`
            cannot receive votes
        """
        require_voter(voter)
        if not can_receive_votes(votable):
            return False
        return await self.votable_service.remove_vote(votable, voter)

    async def has_voted_for(self, voter: Voter, votable: Any) -> bool:
        """Check whether the voter has voted on the votable in either direction.

        Args:
            voter: Voter to check
            votable: Candidate votable

        Returns:
            True if a vote exists; False if not or if `votable` cannot
            receive votes
        """
        require_voter(voter)
        if not can_receive_votes(votable):
            return False
        return await self.votable_service.is_voted_by(votable, voter)

    async def has_up_voted_for(self, voter: Voter, votable: Any) -> bool:
        """Check whether the voter up voted the votable."""
        require_voter(voter)
        if not can_receive_votes(votable):
            return False
        return await self.votable_service.is_up_voted_by(votable, voter)

    async def has_down_voted_for(self, voter: Voter, votable: Any) -> bool:
        """Check whether the voter down voted the votable."""
        require_voter(voter)
        if not can_receive_votes(votable):
            return False
        return await self.votable_service.is_down_voted_by(votable, voter)

    async def votes_cast(self, voter: Voter) -> list[Vote]:
        """List every vote the voter has cast, on any votable type."""
        return await self.vote_query_service.list_voter_votes(require_voter(voter))

    async def voted_for(self, voter: Voter, votable_class: type[Votable]) -> list[Any]:
        """Votables of a class the voter has voted on, in voting order."""
        return await self._voted_votables(voter, votable_class, None)

    async def up_voted_for(
        self, voter: Voter, votable_class: type[Votable]
    ) -> list[Any]:
        """Votables of a class the voter has up voted."""
        return await self._voted_votables(voter, votable_class, True)

    async def down_voted_for(
        self, voter: Voter, votable_class: type[Votable]
    ) -> list[Any]:
        """Votables of a class the voter has down voted."""
        return await self._voted_votables(voter, votable_class, False)

    async def _voted_votables(
        self,
        voter: Voter,
        votable_class: type[Votable],
        direction: bool | None,
    ) -> list[Any]:
        voter_key = require_voter(voter)
        if not (isinstance(votable_class, type) and issubclass(votable_class, Votable)):
            raise InvalidArgumentError(f"{votable_class!r} is not a Votable class")

        type_name = votable_class.entity_type()
        votes = await self.vote_query_service.list_voter_votes(
            voter_key, votable_type=type_name, direction=direction
        )
        ids = [vote.votable_id for vote in votes if vote.votable_id is not None]
        return await self.entity_registry.resolve_many(type_name, ids)
