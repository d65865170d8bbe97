"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from verdict.domain.model.vote import Vote
from verdict.domain.value import EntityId, EntityRef, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence and aggregation queries.
    Implementations live in the infrastructure layer. Every aggregate is
    computed from the live rows; implementations must not cache counts.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_votable(
        self, voter: EntityRef, votable: EntityRef
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific votable, whatever its direction.

        Args:
            voter: Reference to the voter
            votable: Reference to the votable

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_votable(
        self,
        votable: EntityRef,
        direction: Optional[bool] = None,
        with_comments: bool = False,
    ) -> List[Vote]:
        """Find votes on a votable, oldest first.

        Args:
            votable: Reference to the votable
            direction: Only up votes (True) or down votes (False); None for both
            with_comments: Only votes whose comment is neither NULL nor empty

        Returns:
            List of matching votes
        """
        pass

    @abstractmethod
    async def find_by_voter(
        self,
        voter: EntityRef,
        votable_type: Optional[str] = None,
        direction: Optional[bool] = None,
    ) -> List[Vote]:
        """Find votes cast by a voter, oldest first.

        Args:
            voter: Reference to the voter
            votable_type: Only votes on this entity type
            direction: Only up votes (True) or down votes (False); None for both

        Returns:
            List of matching votes
        """
        pass

    @abstractmethod
    async def count_by_votable(
        self, votable: EntityRef, direction: Optional[bool] = None
    ) -> int:
        """Count votes on a votable.

        Args:
            votable: Reference to the votable
            direction: Only up votes (True) or down votes (False); None for both

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def exists(
        self,
        voter: EntityRef,
        votable: EntityRef,
        direction: Optional[bool] = None,
    ) -> bool:
        """Check whether a voter has voted on a votable.

        Args:
            voter: Reference to the voter
            votable: Reference to the votable
            direction: Require this direction; None for either

        Returns:
            True if a matching vote exists
        """
        pass

    @abstractmethod
    async def find_votable_ids(
        self,
        votable_type: str,
        direction: Optional[bool] = None,
        with_comments: bool = False,
    ) -> List[EntityId]:
        """Find the distinct ids of votables of one type that have votes.

        Each id appears exactly once regardless of how many votes it has.

        Args:
            votable_type: Entity type name of the votables
            direction: Only count up votes (True) or down votes (False)
            with_comments: Only count votes with a non-empty comment

        Returns:
            Distinct votable ids
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Raises an error if a vote already exists for this voter/votable
        combination (unique constraint violation). A failed insert must leave
        the surrounding transaction usable.

        Args:
            vote: The vote to insert

        Returns:
            The saved vote with its assigned id

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        pass

    @abstractmethod
    async def update(self, vote: Vote) -> Vote:
        """Overwrite direction, comment, feedback tags and updated_at.

        Args:
            vote: The persisted vote carrying the new values

        Returns:
            The updated vote

        Raises:
            NotFoundError: If the row no longer exists
        """
        pass

    @abstractmethod
    async def delete_by_voter_and_votable(
        self, voter: EntityRef, votable: EntityRef
    ) -> bool:
        """Delete a voter's vote on a votable.

        Args:
            voter: Reference to the voter
            votable: Reference to the votable

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_entity(self, entity: EntityRef) -> int:
        """Delete every vote where the entity is the votable or the voter.

        Args:
            entity: Reference to a destroyed entity

        Returns:
            Number of votes deleted
        """
        pass
