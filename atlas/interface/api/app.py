"""FastAPI application for the comment moderation API."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from atlas.config import Settings
from atlas.interface.api.routes import comments, health
from atlas.util.di.container import container_lifespan, create_container, setup_di
from atlas.util.observability import instrument_fastapi


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create the FastAPI application.

    Logfire is configured by ``scripts/start_app.py`` before this runs.

    Args:
        container: DI container; the production container if omitted.
            Tests pass one built by ``build_test_container``.

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Atlas Comments API",
        description="Moderation API for paginating travel article comment threads",
        version="0.1.0",
        lifespan=container_lifespan,
    )

    instrument_fastapi(app_instance)

    # The admin UI only reads
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance


# Imported by uvicorn as "atlas.interface.api.app:app"
app = create_app()
