"""Vote authorization policy.

Hosts decide who may vote on what by supplying a `VoteAuthorizer`. It is
only consulted when `APISettings.require_authorization` is on.
"""

from abc import ABC, abstractmethod
from typing import Any

import logfire

from verdict.config import APISettings
from verdict.domain.error import NotAuthorizedError


class VoteAuthorizer(ABC):
    """Decides whether a voter may act on a votable."""

    @abstractmethod
    async def authorize(self, votable: Any, voter: Any) -> bool:
        """Return True to allow the request."""
        pass


class AllowAllAuthorizer(VoteAuthorizer):
    """Default authorizer: every voter may vote on everything."""

    async def authorize(self, votable: Any, voter: Any) -> bool:
        return True


class VoteAccessPolicy:
    """Applies the configured authorizer to vote requests."""

    def __init__(self, authorizer: VoteAuthorizer, api_settings: APISettings) -> None:
        self.authorizer = authorizer
        self.api_settings = api_settings

    async def check(self, votable: Any, voter: Any) -> None:
        """Raise NotAuthorizedError unless the voter may act on the votable."""
        if not self.api_settings.require_authorization:
            return

        if not await self.authorizer.authorize(votable, voter):
            votable_name = str(getattr(votable, "entity_ref", votable))
            voter_name = str(getattr(voter, "entity_ref", voter))
            logfire.warn("Vote access denied", votable=votable_name, voter=voter_name)
            raise NotAuthorizedError(votable_name, voter_name)
