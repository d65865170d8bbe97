"""Unit tests for VoteValidator."""

from uuid import uuid4

import pytest

from verdict.domain.model import InclusionError, PresenceError, UniquenessError, Vote
from verdict.domain.repository import VoteRepository
from verdict.domain.service import FeedbackCatalog, VoteValidator
from verdict.domain.value import EntityRef
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def article_ref() -> EntityRef:
    return EntityRef(type="Article", id=uuid4())


def account_ref() -> EntityRef:
    return EntityRef(type="Account", id=uuid4())


class TestValidateFields:
    """Tests for the storage-free checks."""

    @pytest.mark.asyncio
    async def test_valid_candidate_has_no_errors(self, unit_env):
        """A complete candidate passes."""
        validator = await unit_env.get(VoteValidator)
        candidate = Vote.for_pair(article_ref(), account_ref(), direction=True)

        assert await validator.validate(candidate) == []

    @pytest.mark.asyncio
    async def test_missing_references_are_reported_in_order(self, unit_env):
        """Votable presence is checked before voter presence."""
        validator = await unit_env.get(VoteValidator)
        candidate = Vote(direction=True)

        errors = await validator.validate(candidate)

        assert [type(e) for e in errors] == [PresenceError, PresenceError]
        assert [e.field for e in errors] == ["votable", "voter"]

    @pytest.mark.asyncio
    async def test_missing_direction_is_an_inclusion_error(self, unit_env):
        """Direction must be a boolean."""
        validator = await unit_env.get(VoteValidator)
        candidate = Vote.for_pair(article_ref(), account_ref())

        errors = await validator.validate(candidate)

        assert len(errors) == 1
        assert isinstance(errors[0], InclusionError)
        assert errors[0].field == "direction"

    @pytest.mark.asyncio
    async def test_unknown_tags_are_listed(self, unit_env):
        """Tags outside the catalog are reported with their values."""
        validator = await unit_env.get(VoteValidator)
        catalog = await unit_env.get(FeedbackCatalog)
        catalog.set_tags(["helpful", "spam"])
        candidate = Vote.for_pair(
            article_ref(),
            account_ref(),
            direction=False,
            feedback_tags=["helpful", "rude", "boring"],
        )

        errors = await validator.validate(candidate)

        assert len(errors) == 1
        assert errors[0].field == "feedback_tags"
        assert errors[0].invalid_values == ["rude", "boring"]

    @pytest.mark.asyncio
    async def test_non_string_tags_are_reported(self, unit_env):
        """Unchecked candidates with non-string tags get an error, not a crash."""
        validator = await unit_env.get(VoteValidator)
        catalog = await unit_env.get(FeedbackCatalog)
        catalog.set_tags(["helpful"])
        # model_copy skips field validation
        candidate = Vote.for_pair(
            article_ref(), account_ref(), direction=True
        ).model_copy(update={"feedback_tags": ["helpful", 1]})

        errors = await validator.validate(candidate)

        assert len(errors) == 1
        assert isinstance(errors[0], InclusionError)
        assert errors[0].invalid_values == ["1"]
        assert errors[0].message == "Invalid feedback tag(s): 1"

    @pytest.mark.asyncio
    async def test_any_tag_is_invalid_while_catalog_is_empty(self, unit_env):
        """An empty catalog rejects every supplied tag."""
        validator = await unit_env.get(VoteValidator)
        catalog = await unit_env.get(FeedbackCatalog)
        catalog.set_tags([])
        candidate = Vote.for_pair(
            article_ref(), account_ref(), direction=True, feedback_tags=["helpful"]
        )

        errors = await validator.validate(candidate)

        assert len(errors) == 1
        assert errors[0].message == "Feedback tags are not enabled"

    @pytest.mark.asyncio
    async def test_no_tags_is_valid_while_catalog_is_empty(self, unit_env):
        """Omitting tags is always allowed."""
        validator = await unit_env.get(VoteValidator)
        candidate = Vote.for_pair(
            article_ref(), account_ref(), direction=True, feedback_tags=None
        )

        assert await validator.validate(candidate) == []

    @pytest.mark.asyncio
    async def test_catalog_change_applies_to_next_validation(self, unit_env):
        """Validation reads the live catalog."""
        validator = await unit_env.get(VoteValidator)
        catalog = await unit_env.get(FeedbackCatalog)
        candidate = Vote.for_pair(
            article_ref(), account_ref(), direction=True, feedback_tags=["new"]
        )

        catalog.set_tags(["old"])
        assert len(await validator.validate(candidate)) == 1

        catalog.set_tags(["old", "new"])
        assert await validator.validate(candidate) == []


class TestUniquenessCheck:
    """Tests for the advisory uniqueness check."""

    @pytest.mark.asyncio
    async def test_other_row_for_pair_is_reported(self, unit_env):
        """A second candidate for a stored pair is flagged."""
        validator = await unit_env.get(VoteValidator)
        vote_repo = await unit_env.get(VoteRepository)
        votable, voter = article_ref(), account_ref()
        await vote_repo.save(Vote.for_pair(votable, voter, direction=True))

        errors = await validator.validate(
            Vote.for_pair(votable, voter, direction=False)
        )

        assert len(errors) == 1
        assert isinstance(errors[0], UniquenessError)
        assert errors[0].field == "voter"

    @pytest.mark.asyncio
    async def test_stored_row_is_not_its_own_duplicate(self, unit_env):
        """Re-validating the persisted row itself passes."""
        validator = await unit_env.get(VoteValidator)
        vote_repo = await unit_env.get(VoteRepository)
        saved = await vote_repo.save(
            Vote.for_pair(article_ref(), account_ref(), direction=True)
        )

        assert await validator.validate(saved) == []

    @pytest.mark.asyncio
    async def test_check_skipped_when_reference_missing(self, unit_env):
        """Only presence errors are reported without both references."""
        validator = await unit_env.get(VoteValidator)

        errors = await validator.validate(
            Vote.for_pair(article_ref(), None, direction=True)
        )

        assert [e.kind for e in errors] == ["presence"]


class TestValidatorWithoutContainer:
    """The validator can be built directly around any repository."""

    @pytest.mark.asyncio
    async def test_direct_construction(self):
        from verdict.persistence.repository.inmemory import InMemoryVoteRepository

        validator = VoteValidator(InMemoryVoteRepository(), FeedbackCatalog(["ok"]))
        candidate = Vote.for_pair(
            article_ref(), account_ref(), direction=True, feedback_tags=["ok"]
        )

        assert validator.validate_fields(candidate) == []
