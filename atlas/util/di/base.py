"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with swappable implementations; tests unmock them by name
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A component base declares ``__mock_component__``; its subclasses set
    ``__is_mock__`` to say which implementation they are. Providers without
    subclasses are used as-is in every container.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
