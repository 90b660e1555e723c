"""Domain value types.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum


class CommentStatus(str, Enum):
    """Moderation status of an article comment."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class UserRole(str, Enum):
    """Platform role of a user."""

    TRAVELLER = "traveller"
    GUIDE = "guide"
    SUPPORT = "support"
    ADMIN = "admin"


class CommentSortKey(str, Enum):
    """Logical sort keys accepted from the moderation UI.

    Values are the wire names; ``field`` is the record attribute ordered on.
    """

    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    LIKES = "likes"
    STATUS = "status"

    @property
    def field(self) -> str:
        return _SORT_FIELDS[self]


_SORT_FIELDS = {
    CommentSortKey.CREATED_AT: "created_at",
    CommentSortKey.UPDATED_AT: "updated_at",
    CommentSortKey.LIKES: "likes",
    CommentSortKey.STATUS: "status",
}


class SortDirection(str, Enum):
    """Direction of the primary sort key."""

    ASC = "asc"
    DESC = "desc"
