"""Unit tests for RemoveVoteUseCase."""

import pytest

from verdict.application.usecase.vote import RemoveVoteRequest, RemoveVoteUseCase
from verdict.domain.error import NotAuthenticatedError
from verdict.domain.service import EntityRegistry, VotableService
from tests.conftest import make_account, make_article
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRemoveVoteUseCase:
    """Tests for RemoveVoteUseCase."""

    @pytest.mark.asyncio
    async def test_remove_existing_vote(self, unit_env):
        """Removing an existing vote reports success."""
        use_case = await unit_env.get(RemoveVoteUseCase)
        votable_service = await unit_env.get(VotableService)
        registry = await unit_env.get(EntityRegistry)
        article, alice = make_article(registry), make_account(registry)
        await votable_service.vote_up(article, alice)

        response = await use_case.execute(
            RemoveVoteRequest(
                votable_type="Article", votable_id=str(article.id), voter=alice
            )
        )

        assert response.success is True
        assert response.message == "Vote removed"
        assert await votable_service.votes_count(article) == 0

    @pytest.mark.asyncio
    async def test_remove_without_vote(self, unit_env):
        """Nothing to remove is reported, not raised."""
        use_case = await unit_env.get(RemoveVoteUseCase)
        registry = await unit_env.get(EntityRegistry)
        article, alice = make_article(registry), make_account(registry)

        response = await use_case.execute(
            RemoveVoteRequest(
                votable_type="Article", votable_id=str(article.id), voter=alice
            )
        )

        assert response.success is False
        assert response.message == "No vote found to remove"

    @pytest.mark.asyncio
    async def test_remove_only_affects_own_vote(self, unit_env):
        """Other voters' votes stay."""
        use_case = await unit_env.get(RemoveVoteUseCase)
        votable_service = await unit_env.get(VotableService)
        registry = await unit_env.get(EntityRegistry)
        article = make_article(registry)
        alice, bob = make_account(registry, "alice"), make_account(registry, "bob")
        await votable_service.vote_up(article, alice)
        await votable_service.vote_down(article, bob)

        await use_case.execute(
            RemoveVoteRequest(
                votable_type="Article", votable_id=str(article.id), voter=alice
            )
        )

        assert await votable_service.is_voted_by(article, bob) is True
        assert await votable_service.votes_count(article) == 1

    @pytest.mark.asyncio
    async def test_anonymous_raises(self, unit_env):
        use_case = await unit_env.get(RemoveVoteUseCase)
        registry = await unit_env.get(EntityRegistry)
        article = make_article(registry)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(
                RemoveVoteRequest(votable_type="Article", votable_id=str(article.id))
            )
