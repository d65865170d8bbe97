"""Integration tests for PostgresVoteRepository.

Requires PostgreSQL at DATABASE__URL with migrations applied
(`python scripts/run_migrations.py`).
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from verdict.domain.model import Vote
from verdict.domain.repository import VoteRepository
from verdict.domain.service import VoteService
from verdict.domain.value import EntityRef
from tests.harness import create_env_fixture

# Integration fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


def article_ref() -> EntityRef:
    return EntityRef(type="Article", id=uuid4())


def account_ref() -> EntityRef:
    return EntityRef(type="Account", id=uuid4())


class TestPostgresVoteRepository:
    """Tests against a real database."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, integration_env):
        """Saved votes are found by pair."""
        repo = await integration_env.get(VoteRepository)
        votable, voter = article_ref(), account_ref()

        saved = await repo.save(
            Vote.for_pair(
                votable, voter, direction=False, comment="", feedback_tags=["a"]
            )
        )
        found = await repo.find_by_voter_and_votable(voter, votable)

        assert found is not None
        assert found.id == saved.id
        assert found.is_down
        assert found.comment == ""
        assert found.feedback_tags == ["a"]

    @pytest.mark.asyncio
    async def test_duplicate_insert_keeps_transaction_usable(self, integration_env):
        """The savepoint absorbs the unique violation."""
        repo = await integration_env.get(VoteRepository)
        votable, voter = article_ref(), account_ref()
        await repo.save(Vote.for_pair(votable, voter, direction=True))

        with pytest.raises(IntegrityError):
            await repo.save(Vote.for_pair(votable, voter, direction=False))

        assert await repo.count_by_votable(votable) == 1

    @pytest.mark.asyncio
    async def test_comment_filter_excludes_empty(self, integration_env):
        """Empty comments are not comments in SQL either."""
        service = await integration_env.get(VoteService)
        repo = await integration_env.get(VoteRepository)
        votable = article_ref()
        await service.vote_up(votable, account_ref(), comment="")
        await service.vote_up(votable, account_ref(), comment="Real")
        await service.vote_down(votable, account_ref())

        with_comments = await repo.find_by_votable(votable, with_comments=True)

        assert [v.comment for v in with_comments] == ["Real"]

    @pytest.mark.asyncio
    async def test_distinct_votable_ids(self, integration_env):
        """Each votable appears once however many votes it has."""
        service = await integration_env.get(VoteService)
        repo = await integration_env.get(VoteRepository)
        votable_type = f"Scoped{uuid4().hex[:8]}"
        first = EntityRef(type=votable_type, id=uuid4())
        second = EntityRef(type=votable_type, id=uuid4())
        for _ in range(3):
            await service.vote_up(first, account_ref())
        await service.vote_down(second, account_ref())

        assert await repo.find_votable_ids(votable_type) == [first.id, second.id]
        assert await repo.find_votable_ids(votable_type, direction=False) == [
            second.id
        ]
