"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components a test container can swap for an in-memory double:
# vote storage, and the registry of host entities
Component = Literal["persistence", "entities"]


class ProviderBase(Provider):
    """Base for verdict's providers.

    Attributes:
        __mock_component__: Component this provider implements, None for
            providers that are never swapped
        __is_mock__: Whether this provider is the test double
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
