"""PostgreSQL implementation of Comment repository."""

import asyncio
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional

import logfire
from sqlalchemy import and_, desc, func, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from atlas.domain.model import Comment, CommentStats, EnrichedComment, MostActiveArticle
from atlas.domain.repository import CommentRepository
from atlas.domain.value import (
    ArticleId,
    CommentFilters,
    CommentId,
    CommentScope,
    CommentStatus,
    CursorPosition,
    SortSpec,
)
from atlas.persistence.error import StoreUnavailableError
from atlas.persistence.mappers import row_to_comment, row_to_enriched_comment
from atlas.persistence.query import (
    build_range_predicate,
    compile_filters,
    enriched_comments,
    order_by_clauses,
)
from atlas.persistence.tables import article_comments_table


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Translate driver failures into StoreUnavailableError."""
    try:
        yield
    except (DBAPIError, OSError, asyncio.TimeoutError) as e:
        logfire.error(
            "Comment store unavailable",
            operation=operation,
            error_type=type(e).__name__,
        )
        raise StoreUnavailableError(
            f"Comment store unavailable during {operation}"
        ) from e


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones."""
        stmt = select(article_comments_table).where(
            article_comments_table.c.id == comment_id
        )
        with _store_errors("find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_window(
        self,
        scope: CommentScope,
        filters: CommentFilters,
        sort: SortSpec,
        after: Optional[CursorPosition],
        limit: int,
    ) -> list[EnrichedComment]:
        """Fetch one keyset window in a single statement."""
        enriched = enriched_comments()

        stmt = select(enriched).where(and_(*compile_filters(filters, scope, enriched)))

        range_predicate = build_range_predicate(after, sort, enriched)
        if range_predicate is not None:
            stmt = stmt.where(range_predicate)

        stmt = stmt.order_by(*order_by_clauses(sort, enriched)).limit(limit)

        with _store_errors("find_window"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_enriched_comment(row._asdict()) for row in rows]

    async def compute_stats(
        self,
        recent_since: datetime,
        article_id: Optional[ArticleId] = None,
    ) -> CommentStats:
        """Compute dashboard counters over non-deleted comments."""
        comments = article_comments_table
        live = [comments.c.deleted_at.is_(None)]
        if article_id is not None:
            live.append(comments.c.article_id == article_id)

        counts_stmt = select(
            func.count().label("total"),
            func.count()
            .filter(comments.c.status == CommentStatus.APPROVED.value)
            .label("approved"),
            func.count()
            .filter(comments.c.status == CommentStatus.PENDING.value)
            .label("pending"),
            func.count()
            .filter(comments.c.status == CommentStatus.REJECTED.value)
            .label("rejected"),
            func.count(func.distinct(comments.c.author_id)).label("unique_commenters"),
            func.count().filter(comments.c.created_at >= recent_since).label("recent"),
        ).where(*live)

        enriched = enriched_comments()
        avg_terms = [enriched.c.parent_id.is_(None), enriched.c.deleted_at.is_(None)]
        if article_id is not None:
            avg_terms.append(enriched.c.article_id == article_id)
        avg_stmt = select(func.avg(enriched.c.reply_count)).where(*avg_terms)

        active_count = func.count().label("total_comments")
        active_stmt = (
            select(comments.c.article_id, active_count)
            .where(*live)
            .where(comments.c.status == CommentStatus.APPROVED.value)
            .group_by(comments.c.article_id)
            .order_by(desc(active_count), comments.c.article_id)
            .limit(1)
        )

        with _store_errors("compute_stats"):
            counts = (await self.session.execute(counts_stmt)).one()
            avg_replies = (await self.session.execute(avg_stmt)).scalar()
            active = (await self.session.execute(active_stmt)).fetchone()

        return CommentStats(
            total_comments=counts.total,
            total_approved=counts.approved,
            total_pending=counts.pending,
            total_rejected=counts.rejected,
            unique_commenters=counts.unique_commenters,
            avg_replies_per_comment=round(float(avg_replies or 0), 2),
            recent_comments=counts.recent,
            most_active_article=(
                MostActiveArticle(
                    article_id=str(active.article_id),
                    total_comments=active.total_comments,
                )
                if active
                else None
            ),
        )
