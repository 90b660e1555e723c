"""Read models produced by the comment thread engine.

``EnrichedComment`` is what the store hands back after the author/avatar
joins. ``CommentTreeNode`` and ``CommentPage`` are the stable shapes the
moderation UI consumes; they serialize with camelCase keys.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from atlas.domain.model.common import CamelModel, DomainModel
from atlas.domain.value import (
    ArticleId,
    CommentFilters,
    CommentId,
    CommentScope,
    CommentStatus,
    SortSpec,
    UserId,
    UserRole,
)


class AuthorPreview(DomainModel):
    """Author fields resolved through the enrichment joins.

    Every field is optional: any hop of the join chain may be missing.
    """

    id: Optional[UserId] = None
    name: Optional[str] = None
    role: Optional[UserRole] = None
    avatar_url: Optional[str] = None


class EnrichedComment(DomainModel):
    """A comment row with derived counts and its author preview attached."""

    id: CommentId
    article_id: ArticleId
    parent_id: Optional[CommentId] = None
    content: str
    status: CommentStatus
    likes: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    created_at: datetime
    updated_at: datetime
    author: Optional[AuthorPreview] = None


class CommentAuthorNode(CamelModel):
    """Author block of a tree node."""

    id: str
    name: str
    avatar_url: Optional[str] = None
    role: UserRole


class CommentTreeNode(CamelModel):
    """A single comment as rendered in the moderation tree.

    ``children`` is always empty; the UI fetches replies lazily with a
    children-scoped request.
    """

    id: str
    article_id: str
    parent_id: Optional[str] = None
    author: CommentAuthorNode
    content: str
    likes: int
    status: CommentStatus
    reply_count: int
    created_at: str
    updated_at: str
    children: list["CommentTreeNode"] = Field(default_factory=list)


class PaginationMeta(CamelModel):
    """Cursor bookkeeping for one page."""

    cursor: Optional[str] = None
    next_cursor: Optional[str] = None
    page_size: int
    has_next_page: bool


class CommentPageMeta(CamelModel):
    """Echo of the effective query alongside the pagination state."""

    pagination: PaginationMeta
    sort: SortSpec
    filters_applied: CommentFilters
    scope: CommentScope


class CommentPage(CamelModel):
    """One page of comment nodes."""

    nodes: list[CommentTreeNode]
    meta: CommentPageMeta


class MostActiveArticle(CamelModel):
    """Article with the most approved comments."""

    article_id: str
    total_comments: int


class CommentStats(CamelModel):
    """Dashboard counters over all non-deleted comments."""

    total_comments: int = 0
    total_approved: int = 0
    total_pending: int = 0
    total_rejected: int = 0
    unique_commenters: int = 0
    avg_replies_per_comment: float = 0.0
    recent_comments: int = 0
    most_active_article: Optional[MostActiveArticle] = None
