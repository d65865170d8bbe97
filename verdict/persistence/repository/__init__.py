"""PostgreSQL repository implementations."""

from verdict.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresVoteRepository",
]
