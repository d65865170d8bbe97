"""In-memory repository implementations for testing."""

from .entity import InMemoryEntityRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryEntityRepository",
    "InMemoryVoteRepository",
]
