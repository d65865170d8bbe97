"""Vote routes.

Mounted under the configured API prefix. Votables are addressed by their
entity type name and id, e.g. `POST /api/v1/Article/42/votes/vote_up`.
"""

from typing import Any, Literal

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from verdict.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
    ListVotesRequest,
    ListVotesResponse,
    ListVotesUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
)
from verdict.config import APISettings
from verdict.domain.error import DomainError
from verdict.domain.value import VoteType
from verdict.interface.api.auth import VoterAuthenticator
from verdict.interface.error import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Optional body of vote_up / vote_down."""

    comment: str | None = None
    feedback_tags: list[str] | None = None


async def current_voter(
    request: Request,
    authenticator: VoterAuthenticator,
    api_settings: APISettings,
) -> Any | None:
    """Authenticate the request.

    Raises:
        HTTPException: 401 if authentication is required and fails
    """
    voter = await authenticator.authenticate(request)
    if voter is None and api_settings.require_authentication:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return voter


async def _cast_vote(
    vote_type: VoteType,
    votable_type: str,
    votable_id: str,
    body: VoteBody | None,
    request: Request,
    use_case: CastVoteUseCase,
    authenticator: VoterAuthenticator,
    api_settings: APISettings,
) -> CastVoteResponse:
    voter = await current_voter(request, authenticator, api_settings)
    body = body or VoteBody()

    with logfire.span(
        "api.cast_vote",
        votable_type=votable_type,
        votable_id=votable_id,
        vote_type=vote_type.value,
    ):
        try:
            return await use_case.execute(
                CastVoteRequest(
                    votable_type=votable_type,
                    votable_id=votable_id,
                    vote_type=vote_type,
                    voter=voter,
                    comment=body.comment,
                    feedback_tags=body.feedback_tags,
                )
            )
        except DomainError as e:
            raise to_http_exception(e)


@router.post(
    "/{votable_type}/{votable_id}/votes/vote_up",
    response_model=CastVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def vote_up(
    votable_type: str,
    votable_id: str,
    request: Request,
    use_case: FromDishka[CastVoteUseCase],
    authenticator: FromDishka[VoterAuthenticator],
    api_settings: FromDishka[APISettings],
    body: VoteBody | None = None,
) -> CastVoteResponse:
    """Up vote a votable.

    Requires authentication.

    Args:
        votable_type: Entity type name of the votable
        votable_id: Votable id
        request: Incoming request (for authentication)
        use_case: Cast vote use case (injected)
        authenticator: Voter authenticator (injected)
        api_settings: API settings (injected)
        body: Optional comment and feedback tags

    Returns:
        The stored vote

    Raises:
        HTTPException: 400 unknown type, 401 unauthenticated, 403 forbidden,
            404 missing votable, 422 rejected vote
    """
    return await _cast_vote(
        VoteType.UP,
        votable_type,
        votable_id,
        body,
        request,
        use_case,
        authenticator,
        api_settings,
    )


@router.post(
    "/{votable_type}/{votable_id}/votes/vote_down",
    response_model=CastVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def vote_down(
    votable_type: str,
    votable_id: str,
    request: Request,
    use_case: FromDishka[CastVoteUseCase],
    authenticator: FromDishka[VoterAuthenticator],
    api_settings: FromDishka[APISettings],
    body: VoteBody | None = None,
) -> CastVoteResponse:
    """Down vote a votable.

    Same contract as vote_up.
    """
    return await _cast_vote(
        VoteType.DOWN,
        votable_type,
        votable_id,
        body,
        request,
        use_case,
        authenticator,
        api_settings,
    )


@router.delete(
    "/{votable_type}/{votable_id}/votes/remove",
    response_model=RemoveVoteResponse,
)
async def remove_vote(
    votable_type: str,
    votable_id: str,
    request: Request,
    use_case: FromDishka[RemoveVoteUseCase],
    authenticator: FromDishka[VoterAuthenticator],
    api_settings: FromDishka[APISettings],
) -> RemoveVoteResponse:
    """Remove the authenticated voter's vote from a votable.

    Raises:
        HTTPException: 404 if the votable is missing or there was no vote
    """
    voter = await current_voter(request, authenticator, api_settings)

    try:
        response = await use_case.execute(
            RemoveVoteRequest(
                votable_type=votable_type,
                votable_id=votable_id,
                voter=voter,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)

    if not response.success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=response.message,
        )
    return response


@router.get(
    "/{votable_type}/{votable_id}/votes/status",
    response_model=GetVoteStatusResponse,
)
async def vote_status(
    votable_type: str,
    votable_id: str,
    request: Request,
    use_case: FromDishka[GetVoteStatusUseCase],
    authenticator: FromDishka[VoterAuthenticator],
    api_settings: FromDishka[APISettings],
) -> GetVoteStatusResponse:
    """Vote of the authenticated voter on a votable, plus its counts."""
    voter = await current_voter(request, authenticator, api_settings)

    try:
        return await use_case.execute(
            GetVoteStatusRequest(
                votable_type=votable_type,
                votable_id=votable_id,
                voter=voter,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get(
    "/{votable_type}/{votable_id}/votes",
    response_model=ListVotesResponse,
)
async def list_votes(
    votable_type: str,
    votable_id: str,
    request: Request,
    use_case: FromDishka[ListVotesUseCase],
    authenticator: FromDishka[VoterAuthenticator],
    api_settings: FromDishka[APISettings],
    vote_type: Literal["up", "down"] | None = None,
    with_comments: bool = False,
) -> ListVotesResponse:
    """List votes on a votable.

    Example:
        GET /api/v1/Article/42/votes?vote_type=down&with_comments=true
    """
    voter = await current_voter(request, authenticator, api_settings)

    with logfire.span(
        "api.list_votes",
        votable_type=votable_type,
        votable_id=votable_id,
        vote_type=vote_type,
    ):
        try:
            return await use_case.execute(
                ListVotesRequest(
                    votable_type=votable_type,
                    votable_id=votable_id,
                    vote_type=vote_type,
                    with_comments=with_comments,
                    voter=voter,
                )
            )
        except DomainError as e:
            raise to_http_exception(e)
