"""Vote validation."""

from verdict.domain.model.vote import (
    FieldError,
    InclusionError,
    PresenceError,
    UniquenessError,
    Vote,
)
from verdict.domain.repository import VoteRepository

from .base import Service
from .feedback_catalog import FeedbackCatalog


class VoteValidator(Service):
    """Checks a vote candidate and reports every failure as data.

    Validation is soft-fail: nothing here raises for bad input.
    """

    def __init__(
        self, vote_repository: VoteRepository, feedback_catalog: FeedbackCatalog
    ) -> None:
        """Initialize vote validator.

        Args:
            vote_repository: Vote repository, used for the uniqueness pre-check
            feedback_catalog: Live feedback catalog
        """
        self.vote_repository = vote_repository
        self.feedback_catalog = feedback_catalog

    def validate_fields(self, candidate: Vote) -> list[FieldError]:
        """Run the checks that need no storage access.

        Args:
            candidate: Vote to check

        Returns:
            Errors in check order (votable, voter, direction, feedback_tags)
        """
        errors: list[FieldError] = []

        if candidate.votable is None:
            errors.append(PresenceError(field="votable", message="Votable must exist"))

        if candidate.voter is None:
            errors.append(PresenceError(field="voter", message="Voter must exist"))

        if not isinstance(candidate.direction, bool):
            errors.append(
                InclusionError(
                    field="direction", message="Direction must be up (true) or down (false)"
                )
            )

        if candidate.feedback_tags:
            # Unvalidated candidates may carry non-string entries; report them as text
            invalid = [
                str(tag)
                for tag in self.feedback_catalog.invalid_entries(candidate.feedback_tags)
            ]
            if invalid:
                if self.feedback_catalog.enabled:
                    message = f"Invalid feedback tag(s): {', '.join(invalid)}"
                else:
                    message = "Feedback tags are not enabled"
                errors.append(
                    InclusionError(
                        field="feedback_tags", message=message, invalid_values=invalid
                    )
                )

        return errors

    async def validate(self, candidate: Vote) -> list[FieldError]:
        """Validate a vote candidate.

        The uniqueness check only looks for *other* rows for the same pair and
        is skipped when either reference is missing. It is advisory; the
        database constraint is authoritative.

        Args:
            candidate: Vote to check

        Returns:
            All validation errors; empty when the candidate is valid
        """
        errors = self.validate_fields(candidate)

        voter, votable = candidate.voter, candidate.votable
        if voter is not None and votable is not None:
            existing = await self.vote_repository.find_by_voter_and_votable(
                voter, votable
            )
            if existing is not None and existing.id != candidate.id:
                errors.append(
                    UniquenessError(
                        field="voter", message="Voter has already voted on this votable"
                    )
                )

        return errors
