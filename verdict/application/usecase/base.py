"""Base use cases."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from verdict.domain.error import NotFoundError, UnknownEntityTypeError
from verdict.domain.model import Votable
from verdict.domain.service import EntityRegistry
from verdict.domain.value import EntityRef


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class VotableUseCase(BaseUseCase):
    """Base for use cases addressed to one votable by type name and id."""

    def __init__(self, entity_registry: EntityRegistry) -> None:
        self.entity_registry = entity_registry

    async def load_votable(self, votable_type: str, votable_id: str) -> Any:
        """Resolve the addressed votable.

        Raises:
            UnknownEntityTypeError: If the type is not a registered Votable
            NotFoundError: If the id is malformed or no such votable exists
        """
        # Surface unknown types before looking at the id
        if not issubclass(self.entity_registry.entity_class(votable_type), Votable):
            raise UnknownEntityTypeError(votable_type)
        try:
            ref = EntityRef(type=votable_type, id=votable_id)
        except ValidationError:
            raise NotFoundError(votable_type, votable_id)
        return await self.entity_registry.resolve(ref)
