"""Opaque pagination cursors.

A cursor carries the primary sort value of the last record on a page and
that record's id. On the wire it is URL-safe base64 of a small JSON object,
so clients pass it back verbatim without caring about its contents.
"""

import base64
import binascii
import json
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID

import logfire

from atlas.domain.value import CursorPosition

_VALUE_KEY = "v"
_ID_KEY = "id"


def _to_json_scalar(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


class CursorCodec:
    """Serialize and parse cursors.

    ``decode`` never raises: anything it cannot parse is reported as
    ``None``, which the caller treats as "start from the first page".
    """

    @staticmethod
    def encode(sort_value: Any, tie_break_id: UUID) -> str:
        """Build a cursor string.

        Args:
            sort_value: Primary sort value of the last retained record
            tie_break_id: Id of that record

        Returns:
            URL-safe opaque cursor
        """
        payload = json.dumps(
            {_VALUE_KEY: _to_json_scalar(sort_value), _ID_KEY: str(tie_break_id)},
            separators=(",", ":"),
        )
        return base64.urlsafe_b64encode(payload.encode()).decode().rstrip("=")

    @staticmethod
    def decode(cursor: Optional[str]) -> Optional[CursorPosition]:
        """Parse a cursor string.

        Args:
            cursor: Cursor as received from the client

        Returns:
            Decoded position, or None if the cursor is absent or malformed
        """
        if not cursor:
            return None

        try:
            padded = cursor + "=" * (-len(cursor) % 4)
            data = json.loads(base64.urlsafe_b64decode(padded.encode()))
        # Deeply nested JSON exhausts the parser stack
        except (binascii.Error, UnicodeError, ValueError, RecursionError) as e:
            logfire.warn("Ignoring malformed cursor", error_type=type(e).__name__)
            return None

        if not isinstance(data, dict) or _ID_KEY not in data:
            logfire.warn("Ignoring cursor without tie-break id")
            return None

        value = data.get(_VALUE_KEY)
        # bool is an int subclass but never a sort value
        if isinstance(value, bool) or not isinstance(value, (str, int, type(None))):
            logfire.warn("Ignoring cursor with unsupported sort value")
            return None

        try:
            tie_break_id = UUID(str(data[_ID_KEY]))
        except ValueError:
            logfire.warn("Ignoring cursor with malformed tie-break id")
            return None

        return CursorPosition(sort_value=value, tie_break_id=tie_break_id)
