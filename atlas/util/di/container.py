"""Dependency injection container wiring for the API process."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from atlas.util.di import PROVIDERS, get_provider


def create_container(*extra: Provider) -> AsyncContainer:
    """Build the production container.

    Every component resolves to its production implementation. ``extra``
    providers are appended last, so they override earlier registrations.

    Returns:
        Container with the FastAPI request context registered
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider(), *extra)


@asynccontextmanager
async def container_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the app container on shutdown, disposing the engine pool."""
    yield
    container: AsyncContainer = app.state.dishka_container
    await container.close()
    logfire.info("DI container closed")


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app``; each request gets a child scope."""
    setup_dishka(container, app)
