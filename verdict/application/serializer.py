"""Vote serialization for API responses.

How a voter is rendered is host policy: `VoterSerializer` is any callable
taking the voter reference and returning JSON-compatible data.
"""

from datetime import datetime
from typing import Any, Callable

from pydantic import BaseModel

from verdict.domain.model import Vote
from verdict.domain.value import EntityRef, VoteCounts, VoteId, VoteType

VoterSerializer = Callable[[EntityRef], Any]


def default_voter_serializer(voter: EntityRef) -> dict[str, Any]:
    """Render a voter as its id and type."""
    return {"id": str(voter.id), "type": voter.type}


class VoteData(BaseModel):
    """Vote as returned by the API."""

    id: VoteId | None
    vote_type: VoteType | None
    comment: str | None
    feedback_tags: list[str]
    voter: Any
    created_at: datetime
    updated_at: datetime


class VoteCountsData(BaseModel):
    """Aggregate counts as returned by the API."""

    total: int
    up: int
    down: int
    score: int

    @classmethod
    def from_counts(cls, counts: VoteCounts) -> "VoteCountsData":
        return cls(
            total=counts.total, up=counts.up, down=counts.down, score=counts.score
        )


class VoteSerializer:
    """Turns votes into API payloads."""

    def __init__(self, voter_serializer: VoterSerializer = default_voter_serializer):
        self.voter_serializer = voter_serializer

    def serialize(self, vote: Vote) -> VoteData:
        """Serialize a vote.

        Feedback tags are emitted exactly as stored, including tags that have
        since been removed from the catalog.
        """
        return VoteData(
            id=vote.id,
            vote_type=vote.vote_type,
            comment=vote.comment,
            feedback_tags=list(vote.feedback_tags),
            voter=self.voter_serializer(vote.voter) if vote.voter else None,
            created_at=vote.created_at,
            updated_at=vote.updated_at,
        )

    def serialize_many(self, votes: list[Vote]) -> list[VoteData]:
        return [self.serialize(vote) for vote in votes]
