"""Unit tests for the keyset range predicate and ordering."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy.dialects import postgresql

from atlas.domain.value import CommentSortKey, CursorPosition, SortDirection, SortSpec
from atlas.persistence.query import (
    build_range_predicate,
    enriched_comments,
    order_by_clauses,
)


def _sql(clause) -> str:
    return " ".join(str(clause.compile(dialect=postgresql.dialect())).split())


AFTER = CursorPosition(
    sort_value=datetime(2024, 5, 1, tzinfo=timezone.utc), tie_break_id=uuid4()
)


class TestBuildRangePredicate:
    """Tests for build_range_predicate."""

    def test_no_cursor_means_no_predicate(self):
        assert build_range_predicate(None, SortSpec(), enriched_comments()) is None

    def test_ascending_uses_greater_than(self):
        sort = SortSpec(key=CommentSortKey.CREATED_AT, direction=SortDirection.ASC)

        sql = _sql(build_range_predicate(AFTER, sort, enriched_comments()))

        assert "enriched.created_at >" in sql
        assert " OR " in sql
        assert "enriched.created_at =" in sql
        assert "enriched.id >" in sql

    def test_descending_flips_primary_but_not_tie_break(self):
        sort = SortSpec(key=CommentSortKey.CREATED_AT, direction=SortDirection.DESC)

        sql = _sql(build_range_predicate(AFTER, sort, enriched_comments()))

        assert "enriched.created_at <" in sql
        assert "enriched.id >" in sql
        assert "enriched.id <" not in sql

    def test_uses_sort_field_column(self):
        sort = SortSpec(key=CommentSortKey.LIKES, direction=SortDirection.DESC)
        after = CursorPosition(sort_value=4, tie_break_id=uuid4())

        sql = _sql(build_range_predicate(after, sort, enriched_comments()))

        assert "enriched.likes <" in sql


class TestOrderByClauses:
    """Tests for order_by_clauses."""

    def test_primary_then_id_ascending(self):
        enriched = enriched_comments()
        sort = SortSpec(key=CommentSortKey.LIKES, direction=SortDirection.DESC)

        clauses = [_sql(c) for c in order_by_clauses(sort, enriched)]

        assert clauses == ["enriched.likes DESC", "enriched.id ASC"]

    def test_id_stays_ascending_for_ascending_sort(self):
        enriched = enriched_comments()
        sort = SortSpec(key=CommentSortKey.STATUS, direction=SortDirection.ASC)

        clauses = [_sql(c) for c in order_by_clauses(sort, enriched)]

        assert clauses == ["enriched.status ASC", "enriched.id ASC"]
