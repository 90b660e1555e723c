"""Domain services."""

from .base import Service
from .comment_thread_service import CommentThreadService
from .cursor_codec import CursorCodec
from .node_transformer import to_node
from .sort_resolver import align_cursor, default_direction, resolve_sort, sort_value_of

__all__ = [
    "CommentThreadService",
    "CursorCodec",
    "Service",
    "align_cursor",
    "default_direction",
    "resolve_sort",
    "sort_value_of",
    "to_node",
]
