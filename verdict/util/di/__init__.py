"""Dependency injection module."""

from typing import Type

from verdict.util.di.application import ProdApplicationProvider
from verdict.util.di.base import Component, ProviderBase
from verdict.util.di.core import ProdConfigProvider
from verdict.util.di.domain import ProdDomainProvider
from verdict.util.di.infrastructure import (
    EntityProvider,
    PersistenceProvider,
    ProdEntityProvider,
    ProdPersistenceProvider,
)
from verdict.util.di.interface import ProdInterfaceProvider
from verdict.util.error import DependencyInjectionError

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ProdInterfaceProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    EntityProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    Automatically determines if provider is mockable by checking for subclasses.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        component_name = getattr(base, "__mock_component__", None) or base.__name__
        raise DependencyInjectionError(component_name, use_mock)

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "ProdInterfaceProvider",
    # Infrastructure base classes
    "EntityProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdEntityProvider",
    "ProdPersistenceProvider",
]
