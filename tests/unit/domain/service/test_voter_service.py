"""Unit tests for VoterService."""

import pytest

from verdict.domain.error import InvalidArgumentError
from verdict.domain.service import EntityRegistry, VoterService
from tests.conftest import make_account, make_article, make_member, store
from tests.entities import Article, Member, Tag, Ticket
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestVoterCasting:
    """Tests for voting from the voter's side."""

    @pytest.mark.asyncio
    async def test_vote_up_for_and_has_voted(self, unit_env):
        """Voting from the voter side shows up in voter queries."""
        service = await unit_env.get(VoterService)
        registry = await unit_env.get(EntityRegistry)
        alice, article = make_account(registry), make_article(registry)

        result = await service.vote_up_for(alice, article, comment="Yes")

        assert result.ok
        assert await service.has_voted_for(alice, article) is True
        assert await service.has_up_voted_for(alice, article) is True
        assert await service.has_down_voted_for(alice, article) is False

    @pytest.mark.asyncio
    async def test_switch_direction(self, unit_env):
        """vote_down_for after vote_up_for flips the same vote."""
        service = await unit_env.get(VoterService)
        registry = await unit_env.get(EntityRegistry)
        alice, article = make_account(registry), make_article(registry)

        first = await service.vote_up_for(alice, article)
        second = await service.vote_down_for(alice, article)

        assert second.vote.id == first.vote.id
        assert await service.has_down_voted_for(alice, article) is True
        assert len(await service.votes_cast(alice)) == 1

    @pytest.mark.asyncio
    async def test_non_votable_returns_false(self, unit_env):
        """Voting on something that cannot receive votes is False."""
        service = await unit_env.get(VoterService)
        registry = await unit_env.get(EntityRegistry)
        alice = make_account(registry)

        assert await service.vote_up_for(alice, Tag(name="x")) is False
        assert await service.vote_down_for(alice, alice) is False
        assert await service.has_voted_for(alice, Tag()) is False
        assert await service.remove_vote_for(alice, Tag()) is False

    @pytest.mark.asyncio
    async def test_none_votable_raises(self, unit_env):
        """A literal None votable is a caller bug."""
        service = await unit_env.get(VoterService)
        registry = await unit_env.get(EntityRegistry)
        alice = make_account(registry)

        with pytest.raises(InvalidArgumentError):
            await service.vote_up_for(alice, None)
        with pytest.raises(InvalidArgumentError):
            await service.has_voted_for(alice, None)

    @pytest.mark.asyncio
    async def test_non_voter_receiver_raises(self, unit_env):
        """Voter methods need a saved voter."""
        service = await unit_env.get(VoterService)
        registry = await unit_env.get(EntityRegistry)
        article = make_article(registry)

        with pytest.raises(InvalidArgumentError):
            await service.vote_up_for(article, article)

    @pytest.mark.asyncio
    async def test_remove_vote_for(self, unit_env):
        """Removing returns True once, then False."""
        service = await unit_env.get(VoterService)
        registry = await unit_env.get(EntityRegistry)
        alice, article = make_account(registry), make_article(registry)
        await service.vote_down_for(alice, article)

        assert await service.remove_vote_for(alice, article) is True
        assert await service.remove_vote_for(alice, article) is False
        assert await service.has_voted_for(alice, article) is False


class TestVotedForScopes:
    """Tests for voted_for / up_voted_for / down_voted_for."""

    @pytest.mark.asyncio
    async def test_scopes_filter_by_class_and_direction(self, unit_env):
        """Only votables of the requested class and direction are listed."""
        service = await unit_env.get(VoterService)
        registry = await unit_env.get(EntityRegistry)
        alice = make_account(registry)
        liked = make_article(registry, "liked")
        disliked = make_article(registry, "disliked")
        ticket = store(registry, Ticket(id=1, summary="Bug"))

        await service.vote_up_for(alice, liked)
        await service.vote_down_for(alice, disliked)
        await service.vote_up_for(alice, ticket)

        assert [a.title for a in await service.voted_for(alice, Article)] == [
            "liked",
            "disliked",
        ]
        assert await service.up_voted_for(alice, Article) == [liked]
        assert await service.down_voted_for(alice, Article) == [disliked]
        assert await service.voted_for(alice, Ticket) == [ticket]

    @pytest.mark.asyncio
    async def test_other_voters_votes_are_excluded(self, unit_env):
        """Scopes only cover the given voter."""
        service = await unit_env.get(VoterService)
        registry = await unit_env.get(EntityRegistry)
        alice, bob = make_account(registry, "alice"), make_account(registry, "bob")
        article = make_article(registry)

        await service.vote_up_for(bob, article)

        assert await service.voted_for(alice, Article) == []

    @pytest.mark.asyncio
    async def test_member_scopes(self, unit_env):
        """Dual-role entities appear in scopes of their own class."""
        service = await unit_env.get(VoterService)
        registry = await unit_env.get(EntityRegistry)
        bob, carol = make_member(registry, "bob"), make_member(registry, "carol")

        await service.vote_up_for(bob, carol)

        assert await service.voted_for(bob, Member) == [carol]
        assert await service.voted_for(carol, Member) == []
