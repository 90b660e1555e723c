"""Comment thread pagination service."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import logfire

from atlas.domain.error import NotFoundError
from atlas.domain.model import (
    Comment,
    CommentPage,
    CommentPageMeta,
    CommentStats,
    PaginationMeta,
)
from atlas.domain.repository import CommentRepository
from atlas.domain.value import ArticleId, CommentId, CommentQuery, CommentScope

from .base import Service
from .cursor_codec import CursorCodec
from .node_transformer import to_node
from .sort_resolver import align_cursor, resolve_sort, sort_value_of

RECENT_WINDOW = timedelta(days=7)


class CommentThreadService(Service):
    """Keyset pagination over an article's comment tree.

    A page request is turned into one ``find_window`` call for
    ``page_size + 1`` records. The extra record only signals that another
    page exists; the next cursor is taken from the last record that is
    actually returned.
    """

    def __init__(
        self, comment_repository: CommentRepository, max_page_size: int = 200
    ) -> None:
        """Initialize comment thread service.

        Args:
            comment_repository: Comment repository
            max_page_size: Upper bound applied to every requested page size
        """
        self.comment_repository = comment_repository
        self.max_page_size = max_page_size

    async def fetch_page(self, query: CommentQuery, scope: CommentScope) -> CommentPage:
        """Fetch one page of comments within a scope.

        Args:
            query: Cursor, page size, raw sort parameters and filters
            scope: Article (and parent comment) being paginated

        Returns:
            Page of tree nodes with pagination metadata
        """
        with logfire.span(
            "comment_thread_service.fetch_page",
            article_id=str(scope.article_id),
            parent_id=str(scope.parent_id) if scope.parent_id else None,
            has_cursor=query.cursor is not None,
        ):
            sort = resolve_sort(query.sort_key, query.sort_direction, scope)
            page_size = min(query.page_size, self.max_page_size)
            after = align_cursor(CursorCodec.decode(query.cursor), sort)

            records = await self.comment_repository.find_window(
                scope=scope,
                filters=query.filters,
                sort=sort,
                after=after,
                limit=page_size + 1,
            )

            has_next_page = len(records) > page_size
            retained = records[:page_size]

            next_cursor = None
            if has_next_page and retained:
                last = retained[-1]
                next_cursor = CursorCodec.encode(sort_value_of(last, sort), last.id)

            logfire.info(
                "Comment page fetched",
                article_id=str(scope.article_id),
                returned=len(retained),
                has_next_page=has_next_page,
                sort_key=sort.key.value,
                sort_direction=sort.direction.value,
            )

            return CommentPage(
                nodes=[to_node(record) for record in retained],
                meta=CommentPageMeta(
                    pagination=PaginationMeta(
                        cursor=query.cursor,
                        next_cursor=next_cursor,
                        page_size=page_size,
                        has_next_page=has_next_page,
                    ),
                    sort=sort,
                    filters_applied=query.filters,
                    scope=scope,
                ),
            )

    async def verify_parent(
        self, article_id: ArticleId, parent_id: CommentId
    ) -> Comment:
        """Ensure a parent comment exists, is live and belongs to the article.

        Args:
            article_id: Article the children are requested for
            parent_id: Parent comment ID

        Returns:
            The parent comment

        Raises:
            NotFoundError: If the parent is missing, deleted or elsewhere
        """
        with logfire.span(
            "comment_thread_service.verify_parent",
            article_id=str(article_id),
            parent_id=str(parent_id),
        ):
            parent = await self.comment_repository.find_by_id(parent_id)
            if parent is None or parent.is_deleted:
                logfire.warn("Parent comment not found", parent_id=str(parent_id))
                raise NotFoundError("Parent comment", str(parent_id))
            if parent.article_id != article_id:
                logfire.warn(
                    "Parent comment does not belong to article",
                    parent_id=str(parent_id),
                    parent_article_id=str(parent.article_id),
                    target_article_id=str(article_id),
                )
                raise NotFoundError("Parent comment", str(parent_id))
            return parent

    async def get_stats(
        self,
        article_id: Optional[ArticleId] = None,
        now: Optional[datetime] = None,
    ) -> CommentStats:
        """Compute moderation dashboard counters.

        Args:
            article_id: Restrict to one article if given
            now: Reference time for the recent-comments window

        Returns:
            Aggregated comment stats
        """
        with logfire.span(
            "comment_thread_service.get_stats",
            article_id=str(article_id) if article_id else None,
        ):
            reference = now or datetime.now(timezone.utc)
            return await self.comment_repository.compute_stats(
                recent_since=reference - RECENT_WINDOW,
                article_id=article_id,
            )
