"""Domain value objects for the comment moderation API."""

from atlas.domain.value.identifiers import (
    ArticleId,
    AssetFileId,
    AssetId,
    CommentId,
    UserId,
    parse_uuid,
)
from atlas.domain.value.query import (
    ANY_STATUS,
    CommentFilters,
    CommentQuery,
    CommentScope,
    CursorPosition,
    SortSpec,
    SortValue,
)
from atlas.domain.value.types import (
    CommentSortKey,
    CommentStatus,
    SortDirection,
    UserRole,
)

__all__ = [
    # Identifiers
    "ArticleId",
    "AssetFileId",
    "AssetId",
    "CommentId",
    "UserId",
    "parse_uuid",
    # Types
    "CommentSortKey",
    "CommentStatus",
    "SortDirection",
    "UserRole",
    # Query
    "ANY_STATUS",
    "CommentFilters",
    "CommentQuery",
    "CommentScope",
    "CursorPosition",
    "SortSpec",
    "SortValue",
]
