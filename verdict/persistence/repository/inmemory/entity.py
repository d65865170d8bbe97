"""In-memory entity repository for testing and embedding."""

from typing import Any, Optional, Sequence

from verdict.domain.repository.entity import EntityRepository
from verdict.domain.value import EntityId


class InMemoryEntityRepository(EntityRepository):
    """Keeps host entities in a dict keyed by id."""

    def __init__(self, entities: Sequence[Any] = ()) -> None:
        self._entities: dict[EntityId, Any] = {}
        for entity in entities:
            self.add(entity)

    def add(self, entity: Any) -> Any:
        """Store an entity (it must have an `id`)."""
        self._entities[entity.id] = entity
        return entity

    def remove(self, entity_id: EntityId) -> bool:
        return self._entities.pop(entity_id, None) is not None

    async def find_by_id(self, entity_id: EntityId) -> Optional[Any]:
        """Find an entity by ID."""
        return self._entities.get(entity_id)

    async def find_by_ids(self, entity_ids: Sequence[EntityId]) -> list[Any]:
        """Find several entities, skipping unknown ids."""
        return [
            self._entities[entity_id]
            for entity_id in entity_ids
            if entity_id in self._entities
        ]
