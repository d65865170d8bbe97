"""Domain value objects for verdict.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from verdict.domain.value.identifiers import EntityId

# Longest feedback tag the votes.feedback_tags column can store
FEEDBACK_TAG_MAX_LENGTH = 100


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(frozen=True)


class VoteType(str, Enum):
    """Direction of a vote as exposed to API clients."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def from_direction(cls, direction: bool) -> "VoteType":
        return cls.UP if direction else cls.DOWN

    @property
    def direction(self) -> bool:
        return self is VoteType.UP


class EntityRef(ValueObject):
    """Polymorphic reference to a votable or voter entity.

    `type` is the entity type name (see `Votable.entity_type()`), `id` its
    persisted identifier.
    """

    type: str
    id: EntityId

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate type name is not empty and within column limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Entity type must be 1-255 characters")
        return v

    def __str__(self) -> str:
        return f"{self.type}:{self.id}"


class VoteCounts(ValueObject):
    """Aggregate counts for one votable."""

    total: int = 0
    up: int = 0
    down: int = 0

    @property
    def score(self) -> int:
        """Up votes minus down votes. May be negative."""
        return self.up - self.down
