"""Domain value objects for verdict."""

from verdict.domain.value.identifiers import EntityId, IdType, VoteId
from verdict.domain.value.types import (
    FEEDBACK_TAG_MAX_LENGTH,
    EntityRef,
    ValueObject,
    VoteCounts,
    VoteType,
)

__all__ = [
    # Identifiers
    "EntityId",
    "IdType",
    "VoteId",
    # Types
    "FEEDBACK_TAG_MAX_LENGTH",
    "EntityRef",
    "ValueObject",
    "VoteCounts",
    "VoteType",
]
