"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from atlas.domain.model import AuthorPreview, Comment, EnrichedComment
from atlas.domain.value import (
    ArticleId,
    CommentId,
    CommentStatus,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return value if isinstance(value, UUID) else UUID(str(value))


def _role(value: Optional[str]) -> Optional[UserRole]:
    # Unknown roles render with the placeholder role instead of failing the page
    try:
        return UserRole(value) if value is not None else None
    except ValueError:
        return None


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        parent_id=CommentId(parent_id) if parent_id else None,
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        status=CommentStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def row_to_enriched_comment(row: Dict[str, Any]) -> EnrichedComment:
    """Convert a row of the enriched relation to an EnrichedComment.

    A NULL ``author_ref`` means the author join found nothing.

    Args:
        row: Row selected from ``enriched_comments()``

    Returns:
        EnrichedComment domain model
    """
    author_ref = _uuid(row.get("author_ref"))
    author = (
        AuthorPreview(
            id=UserId(author_ref),
            name=row.get("author_name"),
            role=_role(row.get("author_role")),
            avatar_url=row.get("avatar_url"),
        )
        if author_ref is not None
        else None
    )

    parent_id = _uuid(row.get("parent_id"))
    return EnrichedComment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        parent_id=CommentId(parent_id) if parent_id else None,
        content=row["content"],
        status=CommentStatus(row["status"]),
        likes=row.get("likes") or 0,
        reply_count=row.get("reply_count") or 0,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        author=author,
    )
