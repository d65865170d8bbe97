"""Domain model entities for verdict."""

from verdict.domain.model.capability import Entity, Votable, Voter
from verdict.domain.model.vote import (
    FieldError,
    InclusionError,
    PresenceError,
    UniquenessError,
    Vote,
    VoteResult,
)

__all__ = [
    "Entity",
    "Votable",
    "Voter",
    "Vote",
    "VoteResult",
    "FieldError",
    "PresenceError",
    "InclusionError",
    "UniquenessError",
]
