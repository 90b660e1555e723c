"""Persistence component providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from atlas.config import Settings
from atlas.domain.repository import CommentRepository
from atlas.persistence.database import create_engine, create_session_factory
from atlas.persistence.repository import PostgresCommentRepository
from atlas.util.di.base import ProviderBase
from atlas.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base: provides ``CommentRepository``."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed comment store.

    One engine per process, one read-only session per request.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request session; never committed.

        Closing the session rolls back its transaction. A failing request
        rolls back eagerly so the connection returns to the pool clean.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Rolling back comment session",
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)
