"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from atlas.domain.model import Asset, AssetFile, Comment, CommentLike, User
from atlas.domain.value import (
    ArticleId,
    AssetFileId,
    AssetId,
    CommentId,
    CommentStatus,
    UserId,
    UserRole,
)
from atlas.persistence.repository.inmemory import InMemoryCommentStore

# Fixed reference time so ordering by timestamp is deterministic
BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Timestamp ``minutes`` after BASE_TIME."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_comment(
    article_id: UUID,
    *,
    comment_id: UUID | None = None,
    parent_id: UUID | None = None,
    author_id: UUID | None = None,
    content: str = "Lovely walk along the river",
    status: CommentStatus = CommentStatus.APPROVED,
    created_at: datetime | None = None,
    updated_at: datetime | None = None,
    deleted: bool = False,
) -> Comment:
    """Build a comment with sensible defaults."""
    created = created_at or BASE_TIME
    return Comment(
        id=CommentId(comment_id or uuid4()),
        article_id=ArticleId(article_id),
        parent_id=CommentId(parent_id) if parent_id else None,
        author_id=UserId(author_id or uuid4()),
        content=content,
        status=status,
        created_at=created,
        updated_at=updated_at or created,
        deleted_at=created + timedelta(hours=1) if deleted else None,
    )


def add_likes(store: InMemoryCommentStore, comment_id: UUID, count: int) -> None:
    """Attach ``count`` likes from distinct users to a comment."""
    for _ in range(count):
        store.add_like(
            CommentLike(
                comment_id=CommentId(comment_id),
                user_id=UserId(uuid4()),
                liked_at=BASE_TIME,
            )
        )


def add_author(
    store: InMemoryCommentStore,
    name: str,
    *,
    role: UserRole = UserRole.TRAVELLER,
    avatar_url: str | None = None,
) -> User:
    """Add a user, optionally with a resolvable avatar chain."""
    avatar_asset_id = None
    if avatar_url is not None:
        asset_file = store.add_asset_file(
            AssetFile(id=AssetFileId(uuid4()), public_url=avatar_url)
        )
        asset = store.add_asset(Asset(id=AssetId(uuid4()), file_id=asset_file.id))
        avatar_asset_id = asset.id

    return store.add_user(
        User(id=UserId(uuid4()), name=name, role=role, avatar_asset_id=avatar_asset_id)
    )
