"""In-memory comment repository for testing."""

from collections import Counter
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from atlas.domain.model import (
    Asset,
    AssetFile,
    Comment,
    CommentLike,
    CommentStats,
    EnrichedComment,
    MostActiveArticle,
    User,
)
from atlas.domain.repository.comment import CommentRepository
from atlas.domain.value import (
    ANY_STATUS,
    ArticleId,
    CommentFilters,
    CommentId,
    CommentScope,
    CommentStatus,
    CursorPosition,
    SortSpec,
)
from atlas.persistence.query.enrichment import author_preview, run_join_plan


class InMemoryCommentStore:
    """Backing records shared by in-memory comment repositories.

    Holds the comment table and the author/asset records the enrichment
    joins resolve against.
    """

    def __init__(self) -> None:
        self.comments: dict[CommentId, Comment] = {}
        self.likes: list[CommentLike] = []
        self.users: dict[Any, User] = {}
        self.assets: dict[Any, Asset] = {}
        self.asset_files: dict[Any, AssetFile] = {}

    def add_comment(self, comment: Comment) -> Comment:
        self.comments[comment.id] = comment
        return comment

    def add_like(self, like: CommentLike) -> CommentLike:
        self.likes.append(like)
        return like

    def add_user(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def add_asset(self, asset: Asset) -> Asset:
        self.assets[asset.id] = asset
        return asset

    def add_asset_file(self, asset_file: AssetFile) -> AssetFile:
        self.asset_files[asset_file.id] = asset_file
        return asset_file

    def lookup(self, target: str, target_field: str, key: Any) -> Optional[Any]:
        """Find one record of ``target`` whose ``target_field`` equals ``key``."""
        records: dict[Any, Any] = {
            "users": self.users,
            "assets": self.assets,
            "asset_files": self.asset_files,
        }[target]
        if target_field == "id":
            return records.get(key)
        return next(
            (r for r in records.values() if getattr(r, target_field) == key), None
        )

    def clear(self) -> None:
        self.comments.clear()
        self.likes.clear()
        self.users.clear()
        self.assets.clear()
        self.asset_files.clear()


def _comparable(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the SQL semantics: derived counts, optional author joins,
    keyset range and ``(primary, id ASC)`` ordering.
    """

    def __init__(self, store: Optional[InMemoryCommentStore] = None) -> None:
        self.store = store or InMemoryCommentStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones."""
        return self.store.comments.get(comment_id)

    def _likes(self, comment_id: CommentId) -> int:
        return sum(1 for like in self.store.likes if like.comment_id == comment_id)

    def _reply_count(self, comment_id: CommentId) -> int:
        return sum(
            1
            for c in self.store.comments.values()
            if c.parent_id == comment_id and not c.is_deleted
        )

    def _enrich(self, comment: Comment) -> EnrichedComment:
        resolved = run_join_plan(comment, self.store.lookup)
        return EnrichedComment(
            id=comment.id,
            article_id=comment.article_id,
            parent_id=comment.parent_id,
            content=comment.content,
            status=comment.status,
            likes=self._likes(comment.id),
            reply_count=self._reply_count(comment.id),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=author_preview(resolved),
        )

    @staticmethod
    def _matches(record: EnrichedComment, filters: CommentFilters) -> bool:
        if filters.status != ANY_STATUS and record.status != filters.status:
            return False
        if filters.min_likes is not None and record.likes < filters.min_likes:
            return False
        if filters.has_replies is True and record.reply_count == 0:
            return False
        if filters.has_replies is False and record.reply_count > 0:
            return False
        if filters.author_name:
            name = record.author.name if record.author else None
            if not name or filters.author_name.lower() not in name.lower():
                return False
        if filters.search_query:
            if filters.search_query.lower() not in record.content.lower():
                return False
        return True

    @staticmethod
    def _after(
        record: EnrichedComment, after: CursorPosition, sort: SortSpec
    ) -> bool:
        value = _comparable(getattr(record, sort.primary_field))
        if value == after.sort_value:
            return record.id > after.tie_break_id
        return value > after.sort_value if sort.ascending else value < after.sort_value

    async def find_window(
        self,
        scope: CommentScope,
        filters: CommentFilters,
        sort: SortSpec,
        after: Optional[CursorPosition],
        limit: int,
    ) -> list[EnrichedComment]:
        """Fetch one keyset window of enriched comments."""
        in_scope = [
            c
            for c in self.store.comments.values()
            if c.article_id == scope.article_id
            and c.parent_id == scope.parent_id
            and not c.is_deleted
        ]
        records = [r for r in map(self._enrich, in_scope) if self._matches(r, filters)]

        if after is not None:
            records = [r for r in records if self._after(r, after, sort)]

        # Two stable sorts give (primary <dir>, id ASC)
        records.sort(key=lambda r: r.id)
        records.sort(
            key=lambda r: _comparable(getattr(r, sort.primary_field)),
            reverse=not sort.ascending,
        )
        return records[:limit]

    async def compute_stats(
        self,
        recent_since: datetime,
        article_id: Optional[ArticleId] = None,
    ) -> CommentStats:
        """Compute dashboard counters over non-deleted comments."""
        live = [
            c
            for c in self.store.comments.values()
            if not c.is_deleted and (article_id is None or c.article_id == article_id)
        ]
        statuses = Counter(c.status for c in live)

        roots = [c for c in live if c.parent_id is None]
        avg_replies = (
            sum(self._reply_count(c.id) for c in roots) / len(roots) if roots else 0.0
        )

        approved_per_article = Counter(
            c.article_id for c in live if c.status == CommentStatus.APPROVED
        )
        most_active = None
        if approved_per_article:
            top_article, top_count = min(
                approved_per_article.items(), key=lambda item: (-item[1], item[0])
            )
            most_active = MostActiveArticle(
                article_id=str(top_article), total_comments=top_count
            )

        return CommentStats(
            total_comments=len(live),
            total_approved=statuses[CommentStatus.APPROVED],
            total_pending=statuses[CommentStatus.PENDING],
            total_rejected=statuses[CommentStatus.REJECTED],
            unique_commenters=len({c.author_id for c in live}),
            avg_replies_per_comment=round(avg_replies, 2),
            recent_comments=sum(1 for c in live if c.created_at >= recent_since),
            most_active_article=most_active,
        )
