"""Mapping of enriched comments to moderation tree nodes."""

from atlas.domain.model import (
    AuthorPreview,
    CommentAuthorNode,
    CommentTreeNode,
    EnrichedComment,
)
from atlas.domain.value import UserRole

UNKNOWN_AUTHOR_NAME = "Unknown"
UNKNOWN_AUTHOR_ROLE = UserRole.SUPPORT


def _author_node(author: AuthorPreview | None) -> CommentAuthorNode:
    # Orphaned or deleted authors still produce a node
    if author is None or author.id is None:
        return CommentAuthorNode(
            id="",
            name=UNKNOWN_AUTHOR_NAME,
            avatar_url=None,
            role=UNKNOWN_AUTHOR_ROLE,
        )

    return CommentAuthorNode(
        id=str(author.id),
        name=author.name or UNKNOWN_AUTHOR_NAME,
        avatar_url=author.avatar_url or None,
        role=author.role or UNKNOWN_AUTHOR_ROLE,
    )


def to_node(comment: EnrichedComment) -> CommentTreeNode:
    """Build the tree node for one enriched comment.

    Args:
        comment: Comment with derived counts and author preview

    Returns:
        Node with ISO-8601 timestamps and no children
    """
    return CommentTreeNode(
        id=str(comment.id),
        article_id=str(comment.article_id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        author=_author_node(comment.author),
        content=comment.content,
        likes=comment.likes,
        status=comment.status,
        reply_count=comment.reply_count,
        created_at=comment.created_at.isoformat(),
        updated_at=comment.updated_at.isoformat(),
        children=[],
    )
