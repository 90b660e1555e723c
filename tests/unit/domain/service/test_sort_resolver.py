"""Unit tests for sort resolution and cursor alignment."""

from datetime import datetime, timezone
from uuid import uuid4

from atlas.domain.service import align_cursor, default_direction, resolve_sort
from atlas.domain.value import (
    CommentScope,
    CommentSortKey,
    CursorPosition,
    SortDirection,
    SortSpec,
)

ROOT = CommentScope.root(uuid4())
CHILDREN = CommentScope.children_of(uuid4(), uuid4())


class TestResolveSort:
    """Tests for resolve_sort."""

    def test_defaults_for_root_scope(self):
        """Root threads default to newest first."""
        sort = resolve_sort(None, None, ROOT)

        assert sort.key == CommentSortKey.CREATED_AT
        assert sort.direction == SortDirection.DESC

    def test_defaults_for_children_scope(self):
        """Replies default to oldest first."""
        sort = resolve_sort(None, None, CHILDREN)

        assert sort.key == CommentSortKey.CREATED_AT
        assert sort.direction == SortDirection.ASC

    def test_unknown_key_falls_back_to_created_at(self):
        sort = resolve_sort("karma", "asc", ROOT)

        assert sort.key == CommentSortKey.CREATED_AT
        assert sort.direction == SortDirection.ASC

    def test_unknown_direction_falls_back_to_scope_default(self):
        assert resolve_sort("likes", "sideways", ROOT).direction == SortDirection.DESC
        assert resolve_sort("likes", "sideways", CHILDREN).direction == SortDirection.ASC

    def test_direction_is_case_insensitive(self):
        assert resolve_sort("likes", "DESC", CHILDREN).direction == SortDirection.DESC

    def test_every_key_maps_to_a_record_field(self):
        fields = {
            key: resolve_sort(key.value, "asc", ROOT).primary_field
            for key in CommentSortKey
        }

        assert fields == {
            CommentSortKey.CREATED_AT: "created_at",
            CommentSortKey.UPDATED_AT: "updated_at",
            CommentSortKey.LIKES: "likes",
            CommentSortKey.STATUS: "status",
        }

    def test_default_direction(self):
        assert default_direction(ROOT) == SortDirection.DESC
        assert default_direction(CHILDREN) == SortDirection.ASC


class TestAlignCursor:
    """Tests for align_cursor."""

    def test_none_stays_none(self):
        assert align_cursor(None, SortSpec()) is None

    def test_timestamp_string_becomes_datetime(self):
        created_at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        position = CursorPosition(sort_value=created_at.isoformat(), tie_break_id=uuid4())

        aligned = align_cursor(position, SortSpec(key=CommentSortKey.CREATED_AT))

        assert aligned is not None
        assert aligned.sort_value == created_at
        assert aligned.tie_break_id == position.tie_break_id

    def test_naive_timestamp_is_read_as_utc(self):
        position = CursorPosition(sort_value="2024-05-01T12:00:00", tie_break_id=uuid4())

        aligned = align_cursor(position, SortSpec())

        assert aligned.sort_value == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def test_integer_for_timestamp_sort_is_dropped(self):
        """A cursor from a likes sort reused on a date sort restarts pagination."""
        position = CursorPosition(sort_value=5, tie_break_id=uuid4())

        assert align_cursor(position, SortSpec(key=CommentSortKey.UPDATED_AT)) is None

    def test_unparsable_timestamp_is_dropped(self):
        position = CursorPosition(sort_value="yesterday", tie_break_id=uuid4())

        assert align_cursor(position, SortSpec()) is None

    def test_likes_requires_integer(self):
        likes = SortSpec(key=CommentSortKey.LIKES)

        assert align_cursor(CursorPosition(sort_value="5", tie_break_id=uuid4()), likes) is None
        aligned = align_cursor(CursorPosition(sort_value=5, tie_break_id=uuid4()), likes)
        assert aligned is not None
        assert aligned.sort_value == 5

    def test_status_requires_known_status(self):
        status = SortSpec(key=CommentSortKey.STATUS)

        aligned = align_cursor(
            CursorPosition(sort_value="approved", tie_break_id=uuid4()), status
        )
        assert aligned is not None
        assert aligned.sort_value == "approved"
        assert (
            align_cursor(CursorPosition(sort_value="spam", tie_break_id=uuid4()), status)
            is None
        )

    def test_null_value_is_dropped(self):
        position = CursorPosition(sort_value=None, tie_break_id=uuid4())

        assert align_cursor(position, SortSpec(key=CommentSortKey.LIKES)) is None

    def test_likes_outside_bigint_range_is_dropped(self):
        likes = SortSpec(key=CommentSortKey.LIKES)

        for value in (10**30, 2**63, -1):
            position = CursorPosition(sort_value=value, tie_break_id=uuid4())
            assert align_cursor(position, likes) is None

        largest = CursorPosition(sort_value=2**63 - 1, tie_break_id=uuid4())
        assert align_cursor(largest, likes).sort_value == 2**63 - 1

    def test_timestamp_overflowing_utc_is_dropped(self):
        for raw in ("0001-01-01T00:00:00+01:00", "9999-12-31T23:59:59-01:00"):
            position = CursorPosition(sort_value=raw, tie_break_id=uuid4())
            assert align_cursor(position, SortSpec()) is None

    def test_timestamp_is_normalized_to_utc(self):
        position = CursorPosition(
            sort_value="2024-05-01T14:00:00+02:00", tie_break_id=uuid4()
        )

        aligned = align_cursor(position, SortSpec())

        assert aligned.sort_value == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        assert aligned.sort_value.utcoffset().total_seconds() == 0
