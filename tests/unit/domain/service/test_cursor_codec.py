"""Unit tests for CursorCodec."""

import base64
import json
from datetime import datetime, timezone
from uuid import uuid4

from atlas.domain.service import CursorCodec
from atlas.domain.value import CommentStatus


def _raw(payload: object) -> str:
    return base64.urlsafe_b64encode(json.dumps(payload).encode()).decode().rstrip("=")


class TestEncode:
    """Tests for CursorCodec.encode."""

    def test_encodes_url_safe_without_padding(self):
        """Cursor should be safe to put in a query string as-is."""
        cursor = CursorCodec.encode(datetime(2024, 5, 1, tzinfo=timezone.utc), uuid4())

        assert "=" not in cursor
        assert "+" not in cursor
        assert "/" not in cursor

    def test_datetime_round_trips_as_iso_string(self):
        """Timestamps are carried as ISO-8601 strings."""
        created_at = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)
        record_id = uuid4()

        position = CursorCodec.decode(CursorCodec.encode(created_at, record_id))

        assert position is not None
        assert position.sort_value == created_at.isoformat()
        assert position.tie_break_id == record_id

    def test_enum_value_is_stored_raw(self):
        """Status sort values are stored as their wire value."""
        position = CursorCodec.decode(CursorCodec.encode(CommentStatus.PENDING, uuid4()))

        assert position is not None
        assert position.sort_value == "pending"

    def test_integer_value_survives(self):
        position = CursorCodec.decode(CursorCodec.encode(7, uuid4()))

        assert position is not None
        assert position.sort_value == 7


class TestDecode:
    """Tests for CursorCodec.decode fail-open behavior."""

    def test_absent_cursor_is_none(self):
        assert CursorCodec.decode(None) is None
        assert CursorCodec.decode("") is None

    def test_garbage_is_none(self):
        """A tampered cursor restarts pagination instead of failing."""
        assert CursorCodec.decode("not-a-cursor!!") is None
        assert CursorCodec.decode("%%%") is None

    def test_valid_base64_but_not_json_is_none(self):
        cursor = base64.urlsafe_b64encode(b"hello world").decode()

        assert CursorCodec.decode(cursor) is None

    def test_json_without_id_is_none(self):
        assert CursorCodec.decode(_raw({"v": 3})) is None

    def test_json_list_is_none(self):
        assert CursorCodec.decode(_raw([1, 2])) is None

    def test_malformed_id_is_none(self):
        assert CursorCodec.decode(_raw({"v": 3, "id": "nope"})) is None

    def test_bool_value_is_none(self):
        """Booleans are never sort values even though bool subclasses int."""
        assert CursorCodec.decode(_raw({"v": True, "id": str(uuid4())})) is None

    def test_nested_value_is_none(self):
        assert CursorCodec.decode(_raw({"v": {"a": 1}, "id": str(uuid4())})) is None

    def test_accepts_padded_cursor(self):
        record_id = uuid4()
        padded = base64.urlsafe_b64encode(
            json.dumps({"v": 1, "id": str(record_id)}).encode()
        ).decode()

        position = CursorCodec.decode(padded)

        assert position is not None
        assert position.tie_break_id == record_id

    def test_deeply_nested_json_is_none(self):
        """Nesting deep enough to exhaust the JSON parser restarts pagination."""
        cursor = base64.urlsafe_b64encode(b"[" * 5000).decode()

        assert CursorCodec.decode(cursor) is None
