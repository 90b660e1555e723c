"""SQLAlchemy table definitions for the comment moderation API.

These table definitions are used for SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ASSET FILES TABLE
# ============================================================================
asset_files_table = Table(
    "asset_files",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("public_url", Text, nullable=True),
)

# ============================================================================
# ASSETS TABLE
# ============================================================================
assets_table = Table(
    "assets",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "file_id",
        UUID(as_uuid=True),
        ForeignKey("asset_files.id", ondelete="SET NULL"),
        nullable=True,
    ),
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=True),
    Column("role", String(20), nullable=False, server_default="traveller"),
    Column(
        "avatar_asset_id",
        UUID(as_uuid=True),
        ForeignKey("assets.id", ondelete="SET NULL"),
        nullable=True,
    ),
    CheckConstraint(
        "role IN ('traveller', 'guide', 'support', 'admin')", name="user_role_valid"
    ),
)

Index("idx_users_name", users_table.c.name)

# ============================================================================
# ARTICLE COMMENTS TABLE
# ============================================================================
# author_id has no foreign key: authors may be purged while their comments
# stay, and such comments render with an unknown-author placeholder.
article_comments_table = Table(
    "article_comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("article_id", UUID(as_uuid=True), nullable=False),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("article_comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("content", Text, nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "status IN ('pending', 'approved', 'rejected')", name="comment_status_valid"
    ),
    CheckConstraint("char_length(content) <= 5000", name="comment_content_length"),
)

# Keyset indexes: (scope, primary sort field, id)
Index(
    "idx_article_comments_scope_created",
    article_comments_table.c.article_id,
    article_comments_table.c.parent_id,
    article_comments_table.c.created_at,
    article_comments_table.c.id,
)
Index(
    "idx_article_comments_scope_updated",
    article_comments_table.c.article_id,
    article_comments_table.c.parent_id,
    article_comments_table.c.updated_at,
    article_comments_table.c.id,
)
Index(
    "idx_article_comments_scope_status",
    article_comments_table.c.article_id,
    article_comments_table.c.parent_id,
    article_comments_table.c.status,
    article_comments_table.c.id,
)
Index("idx_article_comments_parent_id", article_comments_table.c.parent_id)
Index("idx_article_comments_author_id", article_comments_table.c.author_id)
Index("idx_article_comments_deleted_at", article_comments_table.c.deleted_at)

# ============================================================================
# ARTICLE COMMENT LIKES TABLE
# ============================================================================
article_comment_likes_table = Table(
    "article_comment_likes",
    metadata,
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("article_comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column(
        "liked_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("comment_id", "user_id", name="pk_article_comment_likes"),
)

Index("idx_article_comment_likes_comment_id", article_comment_likes_table.c.comment_id)
