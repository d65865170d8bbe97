"""Infrastructure providers."""

# Import bases
from .entities import EntityProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .entities import ProdEntityProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "EntityProvider",
    "PersistenceProvider",
    "ProdEntityProvider",
    "ProdPersistenceProvider",
]
