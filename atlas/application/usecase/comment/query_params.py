"""Normalization of raw comment page parameters.

Query parameters arrive as untyped strings from the moderation UI. Every
parameter is lenient: an unparsable value falls back to its default instead
of failing the request.
"""

from typing import Literal, Optional

import logfire
from pydantic import BaseModel

from atlas.config import PaginationSettings
from atlas.domain.value import ANY_STATUS, CommentFilters, CommentQuery, CommentStatus

_TRUE = "true"
_FALSE = "false"


class CommentPageParams(BaseModel):
    """Raw page parameters, one field per query parameter."""

    cursor: Optional[str] = None
    page_size: Optional[str] = None
    sort_key: Optional[str] = None
    sort_dir: Optional[str] = None
    status: Optional[str] = None
    min_likes: Optional[str] = None
    has_replies: Optional[str] = None
    author_name: Optional[str] = None
    search_query: Optional[str] = None


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def parse_page_size(raw: Optional[str], pagination: PaginationSettings) -> int:
    """Parse ``pageSize``, clamped to ``[1, max_page_size]``."""
    raw = _blank_to_none(raw)
    if raw is None:
        return pagination.default_page_size
    try:
        size = int(raw)
    except ValueError:
        logfire.warn("Ignoring unparsable page size", page_size=raw)
        return pagination.default_page_size
    return max(1, min(size, pagination.max_page_size))


def parse_status(raw: Optional[str]) -> CommentStatus | Literal["any"]:
    """Parse ``status``; unknown values mean no status constraint."""
    raw = _blank_to_none(raw)
    if raw is None or raw.lower() == ANY_STATUS:
        return ANY_STATUS
    try:
        return CommentStatus(raw.lower())
    except ValueError:
        logfire.warn("Ignoring unknown status filter", status=raw)
        return ANY_STATUS


def parse_min_likes(raw: Optional[str]) -> Optional[int]:
    """Parse ``minLikes``; unparsable or negative values are dropped."""
    raw = _blank_to_none(raw)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        logfire.warn("Ignoring unparsable minLikes", min_likes=raw)
        return None
    return value if value >= 0 else None


def parse_has_replies(raw: Optional[str]) -> Optional[bool]:
    """Parse the ``hasReplies`` tri-state: true, false or no constraint."""
    raw = _blank_to_none(raw)
    if raw is None:
        return None
    lowered = raw.lower()
    if lowered == _TRUE:
        return True
    if lowered == _FALSE:
        return False
    return None


def to_comment_query(
    params: CommentPageParams, pagination: PaginationSettings
) -> CommentQuery:
    """Build a normalized page request from raw parameters.

    Sort parameters stay raw; the sort resolver owns their defaults.

    Args:
        params: Raw query parameters
        pagination: Page size defaults and cap

    Returns:
        Normalized comment query
    """
    return CommentQuery(
        cursor=_blank_to_none(params.cursor),
        page_size=parse_page_size(params.page_size, pagination),
        sort_key=_blank_to_none(params.sort_key),
        sort_direction=_blank_to_none(params.sort_dir),
        filters=CommentFilters(
            status=parse_status(params.status),
            min_likes=parse_min_likes(params.min_likes),
            has_replies=parse_has_replies(params.has_replies),
            author_name=_blank_to_none(params.author_name),
            search_query=_blank_to_none(params.search_query),
        ),
    )
