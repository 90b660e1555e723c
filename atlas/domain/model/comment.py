"""Article comment entity.

Comments are threaded discussions under travel articles. The moderation API
only reads them; authoring and moderation live in other services.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from atlas.domain.model.common import DomainModel
from atlas.domain.value import ArticleId, CommentId, CommentStatus, UserId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Comment(DomainModel):
    """Article comment entity.

    Threading is managed through ``parent_id`` (None for a root comment).
    A reply always belongs to the same article as its parent; that is
    enforced by the authoring side, not here.
    """

    id: CommentId
    article_id: ArticleId
    parent_id: Optional[CommentId] = None
    author_id: UserId
    content: str = Field(max_length=5000)
    status: CommentStatus = CommentStatus.PENDING
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class CommentLike(DomainModel):
    """A single like on a comment.

    The like count shown to moderators is the number of these records.
    """

    comment_id: CommentId
    user_id: UserId
    liked_at: datetime = Field(default_factory=_utcnow)
