"""Comment use cases."""

from .get_child_comments import GetChildCommentsRequest, GetChildCommentsUseCase
from .get_comment_segment import GetCommentSegmentRequest, GetCommentSegmentUseCase
from .get_comment_stats import GetCommentStatsUseCase
from .get_root_comments import GetRootCommentsRequest, GetRootCommentsUseCase
from .query_params import CommentPageParams, to_comment_query

__all__ = [
    "CommentPageParams",
    "GetChildCommentsRequest",
    "GetChildCommentsUseCase",
    "GetCommentSegmentRequest",
    "GetCommentSegmentUseCase",
    "GetCommentStatsUseCase",
    "GetRootCommentsRequest",
    "GetRootCommentsUseCase",
    "to_comment_query",
]
