"""Dependency injection module.

Providers are grouped into components. Config, domain and application
providers are concrete. Persistence is a component base whose subclasses
are the production and in-memory implementations; containers pick one of
them per component.
"""

from typing import Type

from atlas.util.di.application import ProdApplicationProvider
from atlas.util.di.base import Component, ProviderBase
from atlas.util.di.core import ProdConfigProvider
from atlas.util.di.domain import ProdDomainProvider
from atlas.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from atlas.util.error import DependencyInjectionError

# Container order; component bases are swapped for an implementation
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry of ``PROVIDERS`` to a concrete class.

    A class without subclasses is concrete and returned as-is. For a
    component base, the subclass whose ``__is_mock__`` matches ``use_mock``
    is returned; mock subclasses only exist once test code imports them.

    Raises:
        DependencyInjectionError: If the component has no such implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    component = base.__mock_component__ or base.__name__
    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
