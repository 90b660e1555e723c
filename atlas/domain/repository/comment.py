"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from atlas.domain.model import Comment, CommentStats, EnrichedComment
from atlas.domain.value import (
    ArticleId,
    CommentFilters,
    CommentId,
    CommentScope,
    CursorPosition,
    SortSpec,
)


class CommentRepository(ABC):
    """Read-only repository for article comments.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_window(
        self,
        scope: CommentScope,
        filters: CommentFilters,
        sort: SortSpec,
        after: Optional[CursorPosition],
        limit: int,
    ) -> list[EnrichedComment]:
        """Fetch one keyset window of enriched comments.

        Must be a single store round-trip. Results are ordered by
        ``(sort.primary_field, id ASC)`` and start strictly after ``after``.
        Soft-deleted comments are never returned.

        Args:
            scope: Article and parent the comments belong to
            filters: Caller filters (status, likes, replies, author, content)
            sort: Resolved sort specification
            after: Position of the last record of the previous page, if any
            limit: Maximum number of records to return

        Returns:
            Enriched comments in sort order
        """
        pass

    @abstractmethod
    async def compute_stats(
        self,
        recent_since: datetime,
        article_id: Optional[ArticleId] = None,
    ) -> CommentStats:
        """Compute moderation dashboard counters over non-deleted comments.

        Args:
            recent_since: Lower bound for the ``recent_comments`` counter
            article_id: Restrict counters to one article if given

        Returns:
            Aggregated stats
        """
        pass
