"""Unit tests for the voting capability mixins."""

from verdict.domain.model.capability import votable_ref, voter_ref
from tests.entities import Account, Article, Member, Tag, Ticket


class TestCapabilities:
    """Tests for Votable / Voter references."""

    def test_entity_type_defaults_to_class_name(self):
        assert Article.entity_type() == "Article"

    def test_entity_type_can_be_pinned(self):
        assert Ticket.entity_type() == "ticket"

    def test_refs_follow_capability(self):
        """Each helper only answers for its own capability."""
        article, account = Article(), Account()

        assert votable_ref(article) == article.entity_ref
        assert voter_ref(article) is None
        assert voter_ref(account) == account.entity_ref
        assert votable_ref(account) is None

    def test_dual_role(self):
        """An entity may hold both capabilities."""
        member = Member(name="bob")

        assert votable_ref(member) == voter_ref(member)

    def test_unsaved_entity_has_no_ref(self):
        """No id, no reference."""
        assert Article(id=None).entity_ref is None
        assert votable_ref(Ticket()) is None

    def test_plain_object_has_no_ref(self):
        assert votable_ref(Tag()) is None
        assert voter_ref(None) is None
