"""Entity registry domain service.

Resolves polymorphic (type, id) references back into host entities.
"""

from typing import Any, Sequence

import logfire

from verdict.domain.error import NotFoundError, UnknownEntityTypeError
from verdict.domain.model.capability import Entity
from verdict.domain.repository import EntityRepository
from verdict.domain.value import EntityId, EntityRef

from .base import Service


class EntityRegistry(Service):
    """Maps entity type names to host entity classes and their repositories."""

    def __init__(self) -> None:
        self._classes: dict[str, type[Entity]] = {}
        self._repositories: dict[str, EntityRepository] = {}

    def register(self, entity_class: type[Entity], repository: EntityRepository) -> None:
        """Register a votable or voter entity class.

        Args:
            entity_class: Class inheriting Votable and/or Voter
            repository: Loads instances of that class by id

        Raises:
            TypeError: If the class has no voting capability
        """
        if not (isinstance(entity_class, type) and issubclass(entity_class, Entity)):
            raise TypeError(f"{entity_class!r} is neither Votable nor Voter")

        type_name = entity_class.entity_type()
        self._classes[type_name] = entity_class
        self._repositories[type_name] = repository
        logfire.debug("Entity type registered", entity_type=type_name)

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._classes

    def entity_class(self, type_name: str) -> type[Entity]:
        """Return the class registered under a type name.

        Raises:
            UnknownEntityTypeError: If nothing is registered under the name
        """
        try:
            return self._classes[type_name]
        except KeyError:
            raise UnknownEntityTypeError(type_name)

    def repository(self, type_name: str) -> EntityRepository:
        """Return the repository registered under a type name.

        Raises:
            UnknownEntityTypeError: If nothing is registered under the name
        """
        try:
            return self._repositories[type_name]
        except KeyError:
            raise UnknownEntityTypeError(type_name)

    async def resolve(self, ref: EntityRef) -> Any:
        """Load the entity a reference points to.

        Args:
            ref: Polymorphic reference

        Returns:
            The entity

        Raises:
            UnknownEntityTypeError: If the type is not registered
            NotFoundError: If no entity has that id
        """
        entity = await self.repository(ref.type).find_by_id(ref.id)
        if entity is None:
            raise NotFoundError(ref.type, str(ref.id))
        return entity

    async def resolve_many(self, type_name: str, ids: Sequence[EntityId]) -> list[Any]:
        """Load several entities of one type; missing ids are skipped."""
        if not ids:
            return []
        return await self.repository(type_name).find_by_ids(ids)
