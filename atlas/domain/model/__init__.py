"""Domain model entities for the comment moderation API."""

from atlas.domain.model.asset import Asset, AssetFile
from atlas.domain.model.comment import Comment, CommentLike
from atlas.domain.model.thread import (
    AuthorPreview,
    CommentAuthorNode,
    CommentPage,
    CommentPageMeta,
    CommentStats,
    CommentTreeNode,
    EnrichedComment,
    MostActiveArticle,
    PaginationMeta,
)
from atlas.domain.model.user import User

__all__ = [
    "Asset",
    "AssetFile",
    "AuthorPreview",
    "Comment",
    "CommentAuthorNode",
    "CommentLike",
    "CommentPage",
    "CommentPageMeta",
    "CommentStats",
    "CommentTreeNode",
    "EnrichedComment",
    "MostActiveArticle",
    "PaginationMeta",
    "User",
]
