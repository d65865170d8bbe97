"""Domain layer errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from verdict.domain.model.vote import FieldError


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a caller passes a missing voter or votable.

    This is a programmer error and is never converted into a False return.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnknownEntityTypeError(DomainError):
    """Raised when an entity type name has no registered entity class."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown entity type: {type_name}")


class DuplicateVoteConflictError(DomainError):
    """Raised when concurrent writers keep colliding on the same vote pair.

    Reflects a timing issue, not bad input.
    """

    def __init__(self, voter: str, votable: str, attempts: int):
        self.voter = voter
        self.votable = votable
        self.attempts = attempts
        super().__init__(
            f"Vote by {voter} on {votable} still conflicting after {attempts} attempts"
        )


class VoteRejectedError(DomainError):
    """Raised by the application layer when a vote fails validation."""

    def __init__(self, errors: "list[FieldError]"):
        self.errors = errors
        super().__init__("; ".join(error.message for error in errors))


class NotAuthenticatedError(DomainError):
    """Raised when a request has no authenticated voter."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a voter may not vote on a votable."""

    def __init__(self, votable: str, voter: str):
        super().__init__(f"Voter {voter} is not authorized to vote on {votable}")
