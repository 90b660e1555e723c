"""Logfire setup and instrumentation.

Every page request shows up as one FastAPI span containing the comment
service span and exactly one SQL statement.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from atlas.config import Settings

SERVICE_NAME = "atlas-comments-api"

# Liveness probes would otherwise dominate the trace volume
_UNTRACED_URLS = "/health"


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is present."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _comment_request_attributes(
    request: Any, attributes: dict[str, Any]
) -> dict[str, Any]:
    """Attach the path IDs so traces can be filtered per article and parent."""
    result = {**attributes, "path": request.url.path}
    for name in ("article_id", "parent_id"):
        if name in request.path_params:
            result[name] = request.path_params[name]
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests, including query strings, with Logfire.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_comment_request_attributes,
        excluded_urls=_UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag SQL with the span context
    )
