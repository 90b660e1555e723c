#!/usr/bin/env python3
"""Apply Alembic migrations for the comment schema.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f0a9d   # upgrade to a revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from atlas.config import Settings
from atlas.util.logging import setup_logging
from atlas.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the schema, reporting failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    with logfire.span("migrations.upgrade", target=target):
        try:
            command.upgrade(Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the container rather than serve against a stale schema
            raise

    logfire.info("Database migrations applied", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
