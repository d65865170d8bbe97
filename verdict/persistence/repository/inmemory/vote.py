"""In-memory vote repository for testing."""

from itertools import count
from typing import Optional
from uuid import uuid4

from sqlalchemy.exc import IntegrityError

from verdict.domain.error import NotFoundError
from verdict.domain.model.vote import Vote
from verdict.domain.repository.vote import VoteRepository
from verdict.domain.value import EntityId, EntityRef, IdType, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Enforces the (voter, votable) unique constraint the same way the database
    does, by raising IntegrityError on a duplicate insert.
    """

    def __init__(self, id_type: IdType = "uuid") -> None:
        self._votes: list[Vote] = []
        self._id_type = id_type
        self._sequence = count(1)

    def _next_id(self) -> VoteId:
        if self._id_type == "uuid":
            return uuid4()
        return next(self._sequence)

    @staticmethod
    def _matches(vote: Vote, voter: EntityRef, votable: EntityRef) -> bool:
        return vote.voter == voter and vote.votable == votable

    def _find(self, voter: EntityRef, votable: EntityRef) -> Optional[Vote]:
        for vote in self._votes:
            if self._matches(vote, voter, votable):
                return vote
        return None

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        for vote in self._votes:
            if vote.id == vote_id:
                return vote
        return None

    async def find_by_voter_and_votable(
        self, voter: EntityRef, votable: EntityRef
    ) -> Optional[Vote]:
        """Find a vote by voter and votable."""
        return self._find(voter, votable)

    async def find_by_votable(
        self,
        votable: EntityRef,
        direction: Optional[bool] = None,
        with_comments: bool = False,
    ) -> list[Vote]:
        """Find votes on a votable, oldest first."""
        return [
            v
            for v in self._votes
            if v.votable == votable
            and (direction is None or v.direction is direction)
            and (not with_comments or v.has_comment)
        ]

    async def find_by_voter(
        self,
        voter: EntityRef,
        votable_type: Optional[str] = None,
        direction: Optional[bool] = None,
    ) -> list[Vote]:
        """Find votes cast by a voter, oldest first."""
        return [
            v
            for v in self._votes
            if v.voter == voter
            and (votable_type is None or v.votable_type == votable_type)
            and (direction is None or v.direction is direction)
        ]

    async def count_by_votable(
        self, votable: EntityRef, direction: Optional[bool] = None
    ) -> int:
        """Count votes on a votable."""
        return len(await self.find_by_votable(votable, direction=direction))

    async def exists(
        self,
        voter: EntityRef,
        votable: EntityRef,
        direction: Optional[bool] = None,
    ) -> bool:
        """Check whether a voter has voted on a votable."""
        vote = await self.find_by_voter_and_votable(voter, votable)
        return vote is not None and (direction is None or vote.direction is direction)

    async def find_votable_ids(
        self,
        votable_type: str,
        direction: Optional[bool] = None,
        with_comments: bool = False,
    ) -> list[EntityId]:
        """Find distinct ids of voted votables, ordered by their first vote."""
        ids: dict[EntityId, None] = {}
        for v in self._votes:
            if (
                v.votable_type == votable_type
                and v.votable_id is not None
                and (direction is None or v.direction is direction)
                and (not with_comments or v.has_comment)
            ):
                ids.setdefault(v.votable_id, None)
        return list(ids)

    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        voter, votable = vote.voter, vote.votable
        if voter is None or votable is None:
            raise IntegrityError("Vote references missing", None, Exception())

        # Check for duplicate
        if self._find(voter, votable) is not None:
            raise IntegrityError("Duplicate vote", None, Exception())

        saved = vote.model_copy(update={"id": self._next_id()})
        self._votes.append(saved)
        return saved

    async def update(self, vote: Vote) -> Vote:
        """Replace a stored vote with new values."""
        for i, stored in enumerate(self._votes):
            if stored.id == vote.id:
                self._votes[i] = vote
                return vote
        raise NotFoundError("Vote", str(vote.id))

    async def delete_by_voter_and_votable(
        self, voter: EntityRef, votable: EntityRef
    ) -> bool:
        """Delete a vote by voter and votable."""
        for i, vote in enumerate(self._votes):
            if self._matches(vote, voter, votable):
                self._votes.pop(i)
                return True
        return False

    async def delete_by_entity(self, entity: EntityRef) -> int:
        """Delete every vote cast by or on an entity."""
        remaining = [
            v for v in self._votes if v.votable != entity and v.voter != entity
        ]
        deleted = len(self._votes) - len(remaining)
        self._votes = remaining
        return deleted
