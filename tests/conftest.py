"""Test configuration and fixtures."""

from typing import Any

from verdict.domain.service import EntityRegistry
from tests.entities import Account, Article, Member


def store(registry: EntityRegistry, entity: Any) -> Any:
    """Persist an entity in the in-memory repository registered for its type."""
    registry.repository(type(entity).entity_type()).add(entity)
    return entity


def make_article(registry: EntityRegistry, title: str = "Test Article") -> Article:
    """Helper function to create and store an article."""
    return store(registry, Article(title=title))


def make_account(registry: EntityRegistry, handle: str = "alice") -> Account:
    """Helper function to create and store an account."""
    return store(registry, Account(handle=handle))


def make_member(registry: EntityRegistry, name: str = "bob") -> Member:
    """Helper function to create and store a member."""
    return store(registry, Member(name=name))
