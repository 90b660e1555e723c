"""Keyset range predicate and ordering."""

from typing import Optional

from sqlalchemy import ColumnElement, Subquery, UnaryExpression, and_, or_

from atlas.domain.value import CursorPosition, SortSpec


def build_range_predicate(
    after: Optional[CursorPosition],
    sort: SortSpec,
    enriched: Subquery,
) -> Optional[ColumnElement[bool]]:
    """Build the seek predicate for records strictly after a cursor.

    ``(primary past v) OR (primary = v AND id > tie)``, where "past" is
    ``>`` for ascending and ``<`` for descending sorts. The id comparison
    is always ``>`` because the secondary order is always id ascending.

    Args:
        after: Aligned cursor position, or None for the first page
        sort: Resolved sort specification
        enriched: Relation built by ``enriched_comments``

    Returns:
        Predicate, or None when there is no cursor
    """
    if after is None:
        return None

    primary = enriched.c[sort.primary_field]
    value = after.sort_value
    past = primary > value if sort.ascending else primary < value

    return or_(past, and_(primary == value, enriched.c.id > after.tie_break_id))


def order_by_clauses(sort: SortSpec, enriched: Subquery) -> list[UnaryExpression]:
    """``ORDER BY primary <dir>, id ASC``."""
    primary = enriched.c[sort.primary_field]
    return [
        primary.asc() if sort.ascending else primary.desc(),
        enriched.c.id.asc(),
    ]
