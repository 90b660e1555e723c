"""Value objects describing a comment page request.

These are request-scoped: they are built from query parameters, handed to the
pagination engine, echoed back in the page metadata and then discarded.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from atlas.domain.value.common import CamelValueObject, ValueObject
from atlas.domain.value.identifiers import ArticleId, CommentId
from atlas.domain.value.types import CommentSortKey, CommentStatus, SortDirection

ANY_STATUS = "any"

# Primary sort values a cursor may carry once decoded and aligned
SortValue = datetime | int | str


class CommentFilters(CamelValueObject):
    """Normalized, caller-supplied filter set.

    ``None`` means "no constraint" for every optional field.
    """

    status: CommentStatus | Literal["any"] = ANY_STATUS
    min_likes: int | None = None
    has_replies: bool | None = None
    author_name: str | None = None
    search_query: str | None = None


class CommentScope(CamelValueObject):
    """Which slice of an article's comment tree is paginated.

    ``parent_id`` of ``None`` selects root comments; otherwise the direct
    children of that comment.
    """

    article_id: ArticleId
    parent_id: CommentId | None = None

    # Reserved for a depth-limited traversal mode; always None today
    depth_max: int | None = None

    @classmethod
    def root(cls, article_id: ArticleId) -> "CommentScope":
        return cls(article_id=article_id, parent_id=None)

    @classmethod
    def children_of(cls, article_id: ArticleId, parent_id: CommentId) -> "CommentScope":
        return cls(article_id=article_id, parent_id=parent_id)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


class SortSpec(ValueObject):
    """A resolved sort: primary key plus direction.

    The record identifier, ascending, is always the secondary key.
    """

    key: CommentSortKey = CommentSortKey.CREATED_AT
    direction: SortDirection = SortDirection.DESC

    @property
    def primary_field(self) -> str:
        return self.key.field

    @property
    def ascending(self) -> bool:
        return self.direction == SortDirection.ASC


class CursorPosition(ValueObject):
    """Last seen primary sort value plus its record id (the tie-break)."""

    sort_value: SortValue | None
    tie_break_id: UUID


class CommentQuery(ValueObject):
    """A single page request.

    ``sort_key`` and ``sort_direction`` are kept raw; the sort resolver maps
    them, falling back to defaults on unknown values.
    """

    cursor: str | None = None
    page_size: int = Field(default=100, ge=1)
    sort_key: str | None = None
    sort_direction: str | None = None
    filters: CommentFilters = CommentFilters()
