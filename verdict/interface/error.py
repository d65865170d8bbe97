"""Interface layer errors.

Maps domain errors to HTTP responses.
"""

from fastapi import HTTPException, status

from verdict.domain.error import (
    DomainError,
    DuplicateVoteConflictError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    VoteRejectedError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error into the matching HTTPException.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, VoteRejectedError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "message": "Vote rejected",
                "errors": [e.model_dump() for e in error.errors],
            },
        )
    if isinstance(error, NotAuthenticatedError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
        )
    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(error),
        )
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(error),
        )
    if isinstance(error, DuplicateVoteConflictError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(error),
        )
    # Unknown entity types and other bad input
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(error),
    )
