"""Entity registry providers."""

from dishka import Scope, provide

from verdict.domain.service import EntityRegistry
from verdict.util.di.base import ProviderBase


class EntityProvider(ProviderBase):
    """Entity registry component base."""

    __mock_component__ = "entities"


class ProdEntityProvider(EntityProvider):
    """Production entity registry.

    Starts empty. Host applications register their votable and voter classes
    by passing their own provider for EntityRegistry to `create_container`.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_entity_registry(self) -> EntityRegistry:
        """Provide the entity registry."""
        return EntityRegistry()
