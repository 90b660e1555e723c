"""Test container with per-component unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from atlas.util.di import PROVIDERS, Component, get_provider
from atlas.util.error import DependencyInjectionError


def _mockable_components() -> set[str]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container that mocks every component not listed in ``unmock``.

    Unit tests pass nothing and get the in-memory comment store; integration
    tests pass ``{"persistence"}`` to run against PostgreSQL.

    Raises:
        DependencyInjectionError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - _mockable_components()
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    # FastapiProvider lets the same container back TestClient apps
    return make_async_container(*providers, FastapiProvider())
