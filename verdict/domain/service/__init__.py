"""Domain services."""

from .base import Service
from .entity_registry import EntityRegistry
from .feedback_catalog import FeedbackCatalog
from .jwt_service import JWTService
from .votable_service import VotableService
from .vote_query_service import VoteQueryService
from .vote_service import MAX_UPSERT_ATTEMPTS, VoteService
from .vote_validator import VoteValidator
from .voter_service import VoterService

__all__ = [
    "EntityRegistry",
    "FeedbackCatalog",
    "JWTService",
    "MAX_UPSERT_ATTEMPTS",
    "Service",
    "VotableService",
    "VoteQueryService",
    "VoteService",
    "VoteValidator",
    "VoterService",
]
