"""Unit tests for ListVotesUseCase and ListFeedbackTagsUseCase."""

import pytest

from verdict.application.usecase.vote import (
    ListFeedbackTagsUseCase,
    ListVotesRequest,
    ListVotesUseCase,
)
from verdict.domain.service import EntityRegistry, FeedbackCatalog, VotableService
from tests.conftest import make_account, make_article
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed(unit_env):
    """Article with two up votes (one commented) and one commented down vote."""
    votable_service = await unit_env.get(VotableService)
    registry = await unit_env.get(EntityRegistry)
    article = make_article(registry)
    await votable_service.vote_up(article, make_account(registry, "a"), comment="Yes")
    await votable_service.vote_up(article, make_account(registry, "b"))
    await votable_service.vote_down(article, make_account(registry, "c"), comment="No")
    return article


class TestListVotesUseCase:
    """Tests for ListVotesUseCase."""

    @pytest.mark.asyncio
    async def test_list_all_votes(self, unit_env):
        """All votes oldest first, plus the summary."""
        use_case = await unit_env.get(ListVotesUseCase)
        article = await seed(unit_env)

        response = await use_case.execute(
            ListVotesRequest(votable_type="Article", votable_id=str(article.id))
        )

        assert [v.comment for v in response.votes] == ["Yes", None, "No"]
        assert response.summary.total == 3
        assert response.summary.score == 1

    @pytest.mark.asyncio
    async def test_filter_by_direction_and_comments(self, unit_env):
        """Filters combine."""
        use_case = await unit_env.get(ListVotesUseCase)
        article = await seed(unit_env)

        up = await use_case.execute(
            ListVotesRequest(
                votable_type="Article", votable_id=str(article.id), vote_type="up"
            )
        )
        commented_up = await use_case.execute(
            ListVotesRequest(
                votable_type="Article",
                votable_id=str(article.id),
                vote_type="up",
                with_comments=True,
            )
        )

        assert len(up.votes) == 2
        assert [v.comment for v in commented_up.votes] == ["Yes"]
        # Summary is always over all votes
        assert commented_up.summary.total == 3

    @pytest.mark.asyncio
    async def test_unrecognised_vote_type_lists_both(self, unit_env):
        use_case = await unit_env.get(ListVotesUseCase)
        article = await seed(unit_env)

        response = await use_case.execute(
            ListVotesRequest(
                votable_type="Article", votable_id=str(article.id), vote_type="meh"
            )
        )

        assert len(response.votes) == 3


class TestListFeedbackTagsUseCase:
    """Tests for ListFeedbackTagsUseCase."""

    @pytest.mark.asyncio
    async def test_reflects_live_catalog(self, unit_env):
        use_case = await unit_env.get(ListFeedbackTagsUseCase)
        catalog = await unit_env.get(FeedbackCatalog)

        catalog.set_tags([])
        disabled = await use_case.execute()
        catalog.set_tags(["helpful", "spam"])
        enabled = await use_case.execute()

        assert disabled.enabled is False
        assert disabled.tags == []
        assert enabled.enabled is True
        assert enabled.tags == ["helpful", "spam"]
