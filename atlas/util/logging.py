"""Logging configuration for the application.

Standard-library records (uvicorn, alembic, asyncpg) are printed to stdout
and forwarded to Logfire so they land in the same trace as our spans.
"""

import logging
import sys

import logfire

from atlas.config import Settings

# Loggers that drown out request traces at INFO
_NOISY_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access", "alembic.runtime")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Args:
        settings: Application settings
    """
    level = _level_for(settings)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logging.basicConfig(
        level=level,
        handlers=[stdout_handler, logfire.LogfireLoggingHandler()],
        force=True,  # Override any existing configuration
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("atlas").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
