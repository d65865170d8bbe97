"""Unit tests for EntityRegistry."""

from uuid import uuid4

import pytest

from verdict.domain.error import NotFoundError, UnknownEntityTypeError
from verdict.domain.service import EntityRegistry
from verdict.domain.value import EntityRef
from verdict.persistence.repository.inmemory import InMemoryEntityRepository
from tests.entities import Account, Article, Tag, Ticket


@pytest.fixture
def registry():
    registry = EntityRegistry()
    registry.register(Article, InMemoryEntityRepository())
    registry.register(Ticket, InMemoryEntityRepository())
    return registry


class TestEntityRegistry:
    """Tests for polymorphic reference resolution."""

    def test_type_names(self, registry):
        """Class name by default, pinned name when set."""
        assert registry.is_registered("Article")
        assert registry.is_registered("ticket")
        assert not registry.is_registered("Ticket")
        assert registry.entity_class("ticket") is Ticket

    def test_unknown_type_raises(self, registry):
        """Unregistered names are reported with the name."""
        with pytest.raises(UnknownEntityTypeError, match="Account"):
            registry.entity_class("Account")

    def test_register_rejects_plain_classes(self, registry):
        """Only votable or voter classes can be registered."""
        with pytest.raises(TypeError):
            registry.register(Tag, InMemoryEntityRepository())

    @pytest.mark.asyncio
    async def test_resolve(self, registry):
        """A stored entity is loaded by reference."""
        article = Article(title="Found")
        registry.repository("Article").add(article)

        assert await registry.resolve(article.entity_ref) is article

    @pytest.mark.asyncio
    async def test_resolve_missing_raises(self, registry):
        """A dangling reference is NotFound."""
        with pytest.raises(NotFoundError):
            await registry.resolve(EntityRef(type="Article", id=uuid4()))

    @pytest.mark.asyncio
    async def test_resolve_unknown_type_raises(self, registry):
        """A reference to an unregistered type is rejected."""
        registry_ref = EntityRef(type="Account", id=uuid4())

        with pytest.raises(UnknownEntityTypeError):
            await registry.resolve(registry_ref)

    @pytest.mark.asyncio
    async def test_resolve_many_skips_missing_and_keeps_order(self, registry):
        """Missing ids are dropped, the rest keep the requested order."""
        repo = registry.repository("ticket")
        first, second = Ticket(id=1), Ticket(id=2)
        repo.add(first)
        repo.add(second)

        assert await registry.resolve_many("ticket", [2, 99, 1]) == [second, first]
        assert await registry.resolve_many("ticket", []) == []

    def test_account_can_be_registered(self):
        """Voter classes are accepted too."""
        registry = EntityRegistry()
        registry.register(Account, InMemoryEntityRepository())

        assert registry.entity_class("Account") is Account
