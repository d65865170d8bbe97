"""Entity repository interface.

Votes reference host entities polymorphically by (type, id). Hosts expose
their votable and voter entities to verdict through this interface so that
references can be turned back into objects.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from verdict.domain.value import EntityId


class EntityRepository(ABC):
    """Loads host entities of a single type by id."""

    @abstractmethod
    async def find_by_id(self, entity_id: EntityId) -> Optional[Any]:
        """Find an entity by ID.

        Args:
            entity_id: The entity's identifier

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, entity_ids: Sequence[EntityId]) -> list[Any]:
        """Find several entities (batch query).

        Missing ids are skipped. The result follows the order of `entity_ids`.

        Args:
            entity_ids: Identifiers to load

        Returns:
            The entities that exist
        """
        pass
