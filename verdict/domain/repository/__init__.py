"""Repository interfaces for the verdict domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from verdict.domain.repository.entity import EntityRepository
from verdict.domain.repository.vote import VoteRepository

__all__ = [
    "EntityRepository",
    "VoteRepository",
]
