"""Sort resolution for comment pagination.

Every resolved sort is ``(primary field <direction>, id ASC)``; the id
breaks ties between comments sharing a primary value.
"""

from datetime import datetime, timezone
from typing import Any, Optional

import logfire

from atlas.domain.model import EnrichedComment
from atlas.domain.value import (
    CommentScope,
    CommentSortKey,
    CommentStatus,
    CursorPosition,
    SortDirection,
    SortSpec,
)

DEFAULT_SORT_KEY = CommentSortKey.CREATED_AT
TIE_BREAK_FIELD = "id"

# Like counts are bigint in the store
MAX_LIKES = 2**63 - 1


def default_direction(scope: CommentScope) -> SortDirection:
    """Newest first for root threads, oldest first for replies."""
    return SortDirection.DESC if scope.is_root else SortDirection.ASC


def resolve_sort(
    sort_key: Optional[str],
    direction: Optional[str],
    scope: CommentScope,
) -> SortSpec:
    """Map raw sort parameters to a sort specification.

    Unknown keys fall back to ``createdAt`` and unknown directions to the
    scope default.

    Args:
        sort_key: Logical sort key from the request, if any
        direction: ``asc`` / ``desc`` from the request, if any
        scope: Scope of the request, which decides the default direction

    Returns:
        Resolved sort specification
    """
    try:
        key = CommentSortKey(sort_key) if sort_key else DEFAULT_SORT_KEY
    except ValueError:
        logfire.warn("Unknown sort key, using default", sort_key=sort_key)
        key = DEFAULT_SORT_KEY

    try:
        resolved_direction = (
            SortDirection(direction.lower()) if direction else default_direction(scope)
        )
    except ValueError:
        logfire.warn("Unknown sort direction, using default", direction=direction)
        resolved_direction = default_direction(scope)

    return SortSpec(key=key, direction=resolved_direction)


def sort_value_of(comment: EnrichedComment, sort: SortSpec) -> Any:
    """Primary sort value of a record, as stored in a cursor."""
    return getattr(comment, sort.primary_field)


def align_cursor(
    position: Optional[CursorPosition], sort: SortSpec
) -> Optional[CursorPosition]:
    """Coerce a decoded cursor's sort value to the type of the sort field.

    A cursor whose value does not fit the current sort field (tampered, or
    issued for another sort key) is dropped, restarting pagination.

    Args:
        position: Decoded cursor, if any
        sort: Resolved sort specification

    Returns:
        Position with a typed sort value, or None
    """
    if position is None:
        return None

    value = position.sort_value
    try:
        if sort.key in (CommentSortKey.CREATED_AT, CommentSortKey.UPDATED_AT):
            if not isinstance(value, str):
                raise ValueError("timestamp cursor value must be a string")
            value = datetime.fromisoformat(value)
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            # Offsets near year 1 or 9999 overflow the UTC conversion
            value = value.astimezone(timezone.utc)
        elif sort.key == CommentSortKey.LIKES:
            if not isinstance(value, int):
                raise ValueError("likes cursor value must be an integer")
            if not 0 <= value <= MAX_LIKES:
                raise ValueError("likes cursor value out of range")
        else:
            value = CommentStatus(value).value
    except (ValueError, OverflowError) as e:
        logfire.warn(
            "Cursor does not match sort key, restarting pagination",
            sort_key=sort.key.value,
            error=str(e),
        )
        return None

    return CursorPosition(sort_value=value, tie_break_id=position.tie_break_id)
