"""Mock providers for testing."""

from .entities import MockEntityProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockEntityProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
