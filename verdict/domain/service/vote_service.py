"""Vote domain service.

Owns the upsert engine: at most one vote per (voter, votable) pair, updated
in place on every re-vote.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from verdict.domain.error import (
    DuplicateVoteConflictError,
    InvalidArgumentError,
    NotFoundError,
)
from verdict.domain.model.vote import (
    FieldError,
    UniquenessError,
    Vote,
    VoteResult,
    utcnow,
)
from verdict.domain.repository import VoteRepository
from verdict.domain.value import EntityRef

from .base import Service
from .vote_validator import VoteValidator

# Bound on find/insert rounds when concurrent writers race on a new pair
MAX_UPSERT_ATTEMPTS = 3


class VoteService(Service):
    """Domain service for casting and removing votes."""

    def __init__(
        self, vote_repository: VoteRepository, vote_validator: VoteValidator
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            vote_validator: Vote validator (consults the live feedback catalog)
        """
        self.vote_repository = vote_repository
        self.vote_validator = vote_validator

    async def validate(self, candidate: Vote) -> list[FieldError]:
        """Validate a vote candidate without persisting it."""
        return await self.vote_validator.validate(candidate)

    async def vote_for(
        self,
        votable: EntityRef | None,
        voter: EntityRef | None,
        direction: Any,
        comment: str | None = None,
        feedback_tags: Iterable[str] | None = None,
    ) -> VoteResult:
        """Create or update the vote of `voter` on `votable`.

        The existing row for the pair, whatever its direction, is overwritten
        with the given direction, comment and feedback tags. Otherwise a new
        row is inserted. Invalid input is returned as errors on the result and
        storage is left untouched.

        If another writer inserts the same pair between our lookup and our
        insert, the unique constraint rejects our insert and we retry as an
        update of the row that won.

        Args:
            votable: Reference to the votable
            voter: Reference to the voter
            direction: True for up, False for down
            comment: Optional comment
            feedback_tags: Optional feedback tags

        Returns:
            Result holding the persisted vote, or the rejected candidate and
            its errors

        Raises:
            InvalidArgumentError: If voter or votable is None, or if comment or
                feedback_tags hold values of the wrong type
            DuplicateVoteConflictError: If the pair stays contended after
                MAX_UPSERT_ATTEMPTS rounds
        """
        if voter is None:
            raise InvalidArgumentError("Voter cannot be None")
        if votable is None:
            raise InvalidArgumentError("Votable cannot be None")

        tags = list(feedback_tags) if feedback_tags is not None else []
        # A non-boolean direction is kept off the model and reported by validation
        checked_direction = direction if isinstance(direction, bool) else None

        with logfire.span(
            "vote_for",
            votable=str(votable),
            voter=str(voter),
            direction=checked_direction,
        ):
            for attempt in range(1, MAX_UPSERT_ATTEMPTS + 1):
                existing = await self.vote_repository.find_by_voter_and_votable(
                    voter, votable
                )
                now = utcnow()

                candidate = self._build_candidate(
                    existing,
                    votable,
                    voter,
                    direction=checked_direction,
                    comment=comment,
                    feedback_tags=tags,
                    now=now,
                )

                errors = await self.vote_validator.validate(candidate)
                if any(isinstance(error, UniquenessError) for error in errors):
                    # Another writer created the row after our lookup
                    logfire.warn(
                        "Vote pair created concurrently, retrying",
                        votable=str(votable),
                        voter=str(voter),
                        attempt=attempt,
                    )
                    continue

                if errors:
                    logfire.info(
                        "Vote rejected",
                        votable=str(votable),
                        voter=str(voter),
                        errors=[error.message for error in errors],
                    )
                    return VoteResult(vote=candidate, errors=errors)

                if existing is not None:
                    try:
                        saved = await self.vote_repository.update(candidate)
                    except NotFoundError:
                        # Removed concurrently; next round inserts
                        logfire.warn(
                            "Vote removed during update, retrying",
                            votable=str(votable),
                            voter=str(voter),
                            attempt=attempt,
                        )
                        continue
                    logfire.info(
                        "Vote updated",
                        vote_id=str(saved.id),
                        direction=saved.direction,
                    )
                    return VoteResult(vote=saved)

                try:
                    saved = await self.vote_repository.save(candidate)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate vote insert, retrying as update",
                        votable=str(votable),
                        voter=str(voter),
                        attempt=attempt,
                    )
                    continue

                logfire.info(
                    "Vote created", vote_id=str(saved.id), direction=saved.direction
                )
                return VoteResult(vote=saved, created=True)

            logfire.error(
                "Vote upsert gave up",
                votable=str(votable),
                voter=str(voter),
                attempts=MAX_UPSERT_ATTEMPTS,
            )
            raise DuplicateVoteConflictError(
                str(voter), str(votable), MAX_UPSERT_ATTEMPTS
            )

    def _build_candidate(
        self,
        existing: Vote | None,
        votable: EntityRef,
        voter: EntityRef,
        *,
        direction: bool | None,
        comment: Any,
        feedback_tags: list[Any],
        now: datetime,
    ) -> Vote:
        """Build the vote to validate, as an update of `existing` or a new row.

        Both paths go through model validation, so a value of the wrong type
        is rejected the same way whether or not the pair has a vote yet.

        Raises:
            InvalidArgumentError: If comment or feedback_tags hold values of
                the wrong type
        """
        try:
            if existing is not None:
                return Vote.model_validate(
                    {
                        **existing.model_dump(),
                        "direction": direction,
                        "comment": comment,
                        "feedback_tags": feedback_tags,
                        "updated_at": now,
                    }
                )
            return Vote.for_pair(
                votable,
                voter,
                direction=direction,
                comment=comment,
                feedback_tags=feedback_tags,
                created_at=now,
                updated_at=now,
            )
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid vote fields: {e}") from e

    async def vote_up(
        self,
        votable: EntityRef | None,
        voter: EntityRef | None,
        comment: str | None = None,
        feedback_tags: Iterable[str] | None = None,
    ) -> VoteResult:
        """Cast or switch to an up vote."""
        return await self.vote_for(votable, voter, True, comment, feedback_tags)

    async def vote_down(
        self,
        votable: EntityRef | None,
        voter: EntityRef | None,
        comment: str | None = None,
        feedback_tags: Iterable[str] | None = None,
    ) -> VoteResult:
        """Cast or switch to a down vote."""
        return await self.vote_for(votable, voter, False, comment, feedback_tags)

    async def remove_vote(
        self, votable: EntityRef | None, voter: EntityRef | None
    ) -> bool:
        """Remove a voter's vote from a votable.

        Args:
            votable: Reference to the votable
            voter: Reference to the voter

        Returns:
            True if a vote was removed, False if no vote existed

        Raises:
            InvalidArgumentError: If voter or votable is None
        """
        if voter is None:
            raise InvalidArgumentError("Voter cannot be None")
        if votable is None:
            raise InvalidArgumentError("Votable cannot be None")

        with logfire.span("remove_vote", votable=str(votable), voter=str(voter)):
            deleted = await self.vote_repository.delete_by_voter_and_votable(
                voter, votable
            )

            if deleted:
                logfire.info("Vote removed", votable=str(votable), voter=str(voter))
            else:
                logfire.info(
                    "No vote to remove", votable=str(votable), voter=str(voter)
                )

            return deleted

    async def purge_entity(self, entity: EntityRef) -> int:
        """Delete every vote cast by or on a destroyed entity.

        Call this in the same transaction that destroys the entity so that no
        reader sees a vote referencing it.

        Args:
            entity: Reference to the destroyed entity

        Returns:
            Number of votes deleted
        """
        with logfire.span("purge_entity_votes", entity=str(entity)):
            deleted = await self.vote_repository.delete_by_entity(entity)
            logfire.info("Entity votes purged", entity=str(entity), deleted=deleted)
            return deleted
