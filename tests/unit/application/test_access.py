"""Unit tests for VoteAccessPolicy."""

import pytest

from verdict.application.access import (
    AllowAllAuthorizer,
    VoteAccessPolicy,
    VoteAuthorizer,
)
from verdict.config import APISettings
from verdict.domain.error import NotAuthorizedError
from tests.entities import Account, Article


class OwnArticlesOnlyAuthorizer(VoteAuthorizer):
    """Only lets a voter act on articles titled after their handle."""

    async def authorize(self, votable, voter) -> bool:
        return votable.title == voter.handle


class TestVoteAccessPolicy:
    """Tests for the authorization gate."""

    @pytest.mark.asyncio
    async def test_authorizer_ignored_when_not_required(self):
        """The authorizer is only consulted when the setting is on."""
        policy = VoteAccessPolicy(
            OwnArticlesOnlyAuthorizer(), APISettings(require_authorization=False)
        )

        await policy.check(Article(title="x"), Account(handle="y"))

    @pytest.mark.asyncio
    async def test_denied_raises(self):
        """A denial becomes NotAuthorizedError."""
        policy = VoteAccessPolicy(
            OwnArticlesOnlyAuthorizer(), APISettings(require_authorization=True)
        )

        with pytest.raises(NotAuthorizedError):
            await policy.check(Article(title="x"), Account(handle="y"))

        await policy.check(Article(title="alice"), Account(handle="alice"))

    @pytest.mark.asyncio
    async def test_allow_all(self):
        policy = VoteAccessPolicy(
            AllowAllAuthorizer(), APISettings(require_authorization=True)
        )

        await policy.check(Article(), Account())
