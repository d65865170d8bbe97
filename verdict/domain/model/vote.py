"""Vote entity.

A vote joins one voter to one votable with a direction (up or down), an
optional comment and zero or more feedback tags.

Business rules:
- One vote per (voter, votable) pair (enforced by database unique constraint)
- Re-voting updates the existing row in place, last writer wins
- Feedback tags must belong to the feedback catalog at write time
- Polymorphic references on both sides
"""

from datetime import datetime, timezone
from typing import Literal

from pydantic import Field, StrictBool, field_validator

from verdict.domain.model.common import DomainModel
from verdict.domain.value import EntityId, EntityRef, ValueObject, VoteId, VoteType


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Vote(DomainModel):
    """Vote entity.

    Instances with `id=None` are unsaved candidates. References and direction
    are optional so that an invalid candidate can still be built and reported
    on by validation.
    """

    id: VoteId | None = None
    votable_type: str | None = None
    votable_id: EntityId | None = None
    voter_type: str | None = None
    voter_id: EntityId | None = None
    direction: StrictBool | None = None
    comment: str | None = None
    feedback_tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("feedback_tags", mode="before")
    @classmethod
    def default_feedback_tags(cls, v: object) -> object:
        """Treat missing feedback tags as an empty list."""
        return [] if v is None else v

    @classmethod
    def for_pair(
        cls,
        votable: EntityRef | None,
        voter: EntityRef | None,
        **fields: object,
    ) -> "Vote":
        """Build a candidate vote for a votable/voter pair."""
        return cls(
            votable_type=votable.type if votable else None,
            votable_id=votable.id if votable else None,
            voter_type=voter.type if voter else None,
            voter_id=voter.id if voter else None,
            **fields,
        )

    @property
    def votable(self) -> EntityRef | None:
        if self.votable_type is None or self.votable_id is None:
            return None
        return EntityRef(type=self.votable_type, id=self.votable_id)

    @property
    def voter(self) -> EntityRef | None:
        if self.voter_type is None or self.voter_id is None:
            return None
        return EntityRef(type=self.voter_type, id=self.voter_id)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def is_up(self) -> bool:
        return self.direction is True

    @property
    def is_down(self) -> bool:
        return self.direction is False

    @property
    def vote_type(self) -> VoteType | None:
        if self.direction is None:
            return None
        return VoteType.from_direction(self.direction)

    @property
    def has_comment(self) -> bool:
        """Whether the vote carries a meaningful comment (not None, not empty)."""
        return bool(self.comment)


class FieldError(ValueObject):
    """A single validation failure on a vote field.

    Returned as data on a `VoteResult`, never raised.
    """

    field: str
    kind: Literal["presence", "inclusion", "uniqueness"]
    message: str
    invalid_values: list[str] = Field(default_factory=list)


class PresenceError(FieldError):
    """A required reference is missing."""

    kind: Literal["presence"] = "presence"


class InclusionError(FieldError):
    """A value is outside its allowed set."""

    kind: Literal["inclusion"] = "inclusion"


class UniquenessError(FieldError):
    """Another vote already exists for the same voter and votable."""

    kind: Literal["uniqueness"] = "uniqueness"


class VoteResult(ValueObject):
    """Outcome of an upsert.

    On success `vote` is the persisted row. On failure it is the rejected
    candidate holding the attempted values; storage is untouched.
    """

    vote: Vote
    errors: list[FieldError] = Field(default_factory=list)
    created: bool = False

    @property
    def ok(self) -> bool:
        return not self.errors

    def errors_for(self, field: str) -> list[FieldError]:
        return [error for error in self.errors if error.field == field]
