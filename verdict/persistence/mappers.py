"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from verdict.domain.model import Vote


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Stored feedback tags are returned as-is, even when they have since left
    the feedback catalog.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=row["id"],
        votable_type=row["votable_type"],
        votable_id=row["votable_id"],
        voter_type=row["voter_type"],
        voter_id=row["voter_id"],
        direction=row["direction"],
        comment=row.get("comment"),
        feedback_tags=list(row.get("feedback_tags") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    The id is left out while the vote is unsaved so the database assigns it.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    values = vote.model_dump()
    if values["id"] is None:
        del values["id"]
    return values
