"""Engine and session factory for the comment store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from atlas.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine.

    Statements running past ``database.command_timeout`` seconds are
    cancelled by asyncpg and reported as a store outage.

    Args:
        settings: Application settings

    Returns:
        Pooled async engine
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={"command_timeout": database.command_timeout},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for read-only request sessions."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
