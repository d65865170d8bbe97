"""Votable capability domain service.

Gives any `Votable` entity its voting behaviour: casting, removing and
inspecting votes, aggregate counts, and class-level listing scopes.

Two kinds of bad input are told apart on purpose:
- a literal None voter or votable is a caller bug and raises
  InvalidArgumentError;
- a voter that cannot vote (wrong type, or not saved yet) is a legitimate
  runtime check and makes the method return False.
"""

from collections.abc import Iterable
from typing import Any, Literal

import logfire

from verdict.domain.error import InvalidArgumentError
from verdict.domain.model.capability import Votable, votable_ref, voter_ref
from verdict.domain.model.vote import Vote, VoteResult
from verdict.domain.value import EntityRef, VoteCounts

from .base import Service
from .entity_registry import EntityRegistry
from .vote_query_service import VoteQueryService
from .vote_service import VoteService


def require_votable(votable: Any) -> EntityRef:
    """Reference of the votable a method was called for.

    Raises:
        InvalidArgumentError: If votable is None, not Votable, or unsaved
    """
    if votable is None:
        raise InvalidArgumentError("Votable cannot be None")
    ref = votable_ref(votable)
    if ref is None:
        raise InvalidArgumentError(f"{votable!r} is not a saved Votable")
    return ref


def counterpart_voter(voter: Any) -> EntityRef | None:
    """Reference of a voter argument; None when it lacks the capability.

    Raises:
        InvalidArgumentError: If voter is None
    """
    if voter is None:
        raise InvalidArgumentError("Voter cannot be None")
    ref = voter_ref(voter)
    if ref is None:
        logfire.debug("Object cannot vote", voter_class=type(voter).__name__)
    return ref


class VotableService(Service):
    """Domain service implementing the votable side of voting."""

    def __init__(
        self,
        vote_service: VoteService,
        vote_query_service: VoteQueryService,
        entity_registry: EntityRegistry,
    ) -> None:
        """Initialize votable service.

        Args:
            vote_service: Vote upsert engine
            vote_query_service: Vote aggregation queries
            entity_registry: Resolves votable references for listing scopes
        """
        self.vote_service = vote_service
        self.vote_query_service = vote_query_service
        self.entity_registry = entity_registry

    async def vote_up(
        self,
        votable: Votable,
        voter: Any,
        comment: str | None = None,
        feedback_tags: Iterable[str] | None = None,
    ) -> VoteResult | Literal[False]:
        """Up vote `votable` as `voter`.

        Returns:
            The upsert result, or False if `voter` cannot vote
        """
        return await self.vote_for(votable, voter, True, comment, feedback_tags)

    async def vote_down(
        self,
        votable: Votable,
        voter: Any,
        comment: str | None = None,
        feedback_tags: Iterable[str] | None = None,
    ) -> VoteResult | Literal[False]:
        """Down vote `votable` as `voter`.

        Returns:
            The upsert result, or False if `voter` cannot vote
        """
        return await self.vote_for(votable, voter, False, comment, feedback_tags)

    async def vote_for(
        self,
        votable: Votable,
        voter: Any,
        direction: bool,
        comment: str | None = None,
        feedback_tags: Iterable[str] | None = None,
    ) -> VoteResult | Literal[False]:
        votable_key = require_votable(votable)
        voter_key = counterpart_voter(voter)
        if voter_key is None:
            return False
        return await self.vote_service.vote_for(
            votable_key, voter_key, direction, comment, feedback_tags
        )

    async def remove_vote(self, votable: Votable, voter: Any) -> bool:
        """Remove the voter's vote; False if there was none or it cannot vote."""
        votable_key = require_votable(votable)
        voter_key = counterpart_voter(voter)
        if voter_key is None:
            return False
        return await self.vote_service.remove_vote(votable_key, voter_key)

    async def is_voted_by(self, votable: Votable, voter: Any) -> bool:
        """Check whether the voter has voted on the votable in either direction.

        Args:
            votable: Votable receiving the vote
            voter: Candidate voter

        Returns:
            True if a vote exists; False if not or if `voter` cannot vote
        """
        return await self._has_vote(votable, voter, None)

    async def is_up_voted_by(self, votable: Votable, voter: Any) -> bool:
        """Check whether the voter's vote on the votable is an up vote.

        Returns:
            True for an up vote; False otherwise or if `voter` cannot vote
        """
        return await self._has_vote(votable, voter, True)

    async def is_down_voted_by(self, votable: Votable, voter: Any) -> bool:
        """Check whether the voter's vote on the votable is a down vote.

        Returns:
            True for a down vote; False otherwise or if `voter` cannot vote
        """
        return await self._has_vote(votable, voter, False)

    async def vote_by(self, votable: Votable, voter: Any) -> Vote | None:
        """The voter's vote on the votable; None if absent or it cannot vote."""
        votable_key = require_votable(votable)
        voter_key = counterpart_voter(voter)
        if voter_key is None:
            return None
        return await self.vote_query_service.get_vote(votable_key, voter_key)

    async def votes(self, votable: Votable) -> list[Vote]:
        """List every vote on the votable.

        Args:
            votable: Votable to list votes for

        Returns:
            Votes in both directions
        """
        return await self.vote_query_service.list_votes(require_votable(votable))

    async def votes_count(self, votable: Votable) -> int:
        """Count every vote on the votable.

        Args:
            votable: Votable to count votes for

        Returns:
            Number of votes; 0 if there are none
        """
        return await self.vote_query_service.count(require_votable(votable))

    async def up_votes_count(self, votable: Votable) -> int:
        """Count the up votes on the votable."""
        return await self.vote_query_service.count(require_votable(votable), True)

    async def down_votes_count(self, votable: Votable) -> int:
        """Count the down votes on the votable."""
        return await self.vote_query_service.count(require_votable(votable), False)

    async def votes_score(self, votable: Votable) -> int:
        """Up votes minus down votes. May be negative."""
        return await self.vote_query_service.score(require_votable(votable))

    async def votes_summary(self, votable: Votable) -> VoteCounts:
        """Total, up, down and score for the votable in one read.

        Args:
            votable: Votable to summarize

        Returns:
            Aggregate counts computed from the live rows
        """
        return await self.vote_query_service.summarize(require_votable(votable))

    async def votes_with_comments(self, votable: Votable) -> list[Vote]:
        """Votes whose comment is neither None nor empty."""
        return await self.vote_query_service.list_votes(
            require_votable(votable), with_comments=True
        )

    async def up_votes_with_comments(self, votable: Votable) -> list[Vote]:
        """Up votes on the votable that carry a non-empty comment."""
        return await self.vote_query_service.list_votes(
            require_votable(votable), direction=True, with_comments=True
        )

    async def down_votes_with_comments(self, votable: Votable) -> list[Vote]:
        """Down votes on the votable that carry a non-empty comment."""
        return await self.vote_query_service.list_votes(
            require_votable(votable), direction=False, with_comments=True
        )

    # Class-level scopes. Each qualifying votable is returned exactly once.

    async def with_votes(self, votable_class: type[Votable]) -> list[Any]:
        """Find the votables of a class that have at least one vote.

        Args:
            votable_class: Registered votable class to search

        Returns:
            Matching entities, resolved through the entity registry
        """
        return await self._scope(votable_class)

    async def with_up_votes(self, votable_class: type[Votable]) -> list[Any]:
        """Find the votables of a class that have at least one up vote.

        Args:
            votable_class: Registered votable class to search

        Returns:
            Matching entities, resolved through the entity registry
        """
        return await self._scope(votable_class, direction=True)

    async def with_down_votes(self, votable_class: type[Votable]) -> list[Any]:
        """Find the votables of a class that have at least one down vote.

        Args:
            votable_class: Registered votable class to search

        Returns:
            Matching entities, resolved through the entity registry
        """
        return await self._scope(votable_class, direction=False)

    async def with_comments(self, votable_class: type[Votable]) -> list[Any]:
        """Find the votables of a class that have at least one commented vote.

        Args:
            votable_class: Registered votable class to search

        Returns:
            Matching entities, resolved through the entity registry
        """
        return await self._scope(votable_class, with_comments=True)

    async def _has_vote(
        self, votable: Votable, voter: Any, direction: bool | None
    ) -> bool:
        votable_key = require_votable(votable)
        voter_key = counterpart_voter(voter)
        if voter_key is None:
            return False
        return await self.vote_query_service.has_voted(
            votable_key, voter_key, direction
        )

    async def _scope(
        self,
        votable_class: type[Votable],
        direction: bool | None = None,
        with_comments: bool = False,
    ) -> list[Any]:
        if not (isinstance(votable_class, type) and issubclass(votable_class, Votable)):
            raise InvalidArgumentError(f"{votable_class!r} is not a Votable class")

        type_name = votable_class.entity_type()
        with logfire.span(
            "votable_scope",
            votable_type=type_name,
            direction=direction,
            with_comments=with_comments,
        ):
            ids = await self.vote_query_service.voted_votable_ids(
                type_name, direction=direction, with_comments=with_comments
            )
            return await self.entity_registry.resolve_many(type_name, ids)
