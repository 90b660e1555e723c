#!/usr/bin/env python3
"""Start the comment moderation API behind uvicorn."""

import sys

import logfire
import uvicorn

from atlas.config import Settings
from atlas.util.logging import setup_logging
from atlas.util.observability import configure_logfire


def main() -> int:
    """Configure logging and observability, then serve the API."""
    settings = Settings()

    setup_logging(settings)
    # Before uvicorn imports the app, so startup failures are traced
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting comments API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "atlas.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Comments API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
