"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from atlas.domain.error import InvalidIdentifierError

ArticleId = NewType("ArticleId", UUID)
CommentId = NewType("CommentId", UUID)
UserId = NewType("UserId", UUID)
AssetId = NewType("AssetId", UUID)
AssetFileId = NewType("AssetFileId", UUID)


def parse_uuid(raw_value: str, resource: str) -> UUID:
    """Parse a caller-supplied identifier.

    Args:
        raw_value: Identifier as received on the wire
        resource: Human-readable resource name used in the error message

    Returns:
        Parsed UUID

    Raises:
        InvalidIdentifierError: If the value is not a well-formed UUID
    """
    try:
        return UUID(raw_value.strip())
    except (AttributeError, ValueError) as e:
        raise InvalidIdentifierError(resource, str(raw_value)) from e
