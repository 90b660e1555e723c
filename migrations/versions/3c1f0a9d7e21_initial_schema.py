"""initial_schema

Create the schema the comment moderation API reads:
- Asset files and assets (avatar chain)
- Users (name, role, avatar asset)
- Article comments (two-level threads, soft delete, moderation status)
- Article comment likes (one row per user per comment)

Revision ID: 3c1f0a9d7e21
Revises:
Create Date: 2024-05-02 09:14:52.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d7e21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # ASSET FILES / ASSETS tables
    # ========================================================================
    op.create_table(
        "asset_files",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("public_url", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "assets",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("file_id", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(["file_id"], ["asset_files.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column(
            "role",
            sa.String(length=20),
            server_default=sa.text("'traveller'"),
            nullable=False,
        ),
        sa.Column("avatar_asset_id", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(
            ["avatar_asset_id"], ["assets.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "role IN ('traveller', 'guide', 'support', 'admin')",
            name="user_role_valid",
        ),
    )
    op.create_index("idx_users_name", "users", ["name"])

    # ========================================================================
    # ARTICLE COMMENTS table (author_id has no foreign key)
    # ========================================================================
    op.create_table(
        "article_comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("article_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "status",
            sa.String(length=20),
            server_default=sa.text("'pending'"),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("deleted_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["parent_id"], ["article_comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="comment_status_valid",
        ),
        sa.CheckConstraint(
            "char_length(content) <= 5000", name="comment_content_length"
        ),
    )

    # Keyset indexes: (scope, primary sort field, id)
    op.create_index(
        "idx_article_comments_scope_created",
        "article_comments",
        ["article_id", "parent_id", "created_at", "id"],
    )
    op.create_index(
        "idx_article_comments_scope_updated",
        "article_comments",
        ["article_id", "parent_id", "updated_at", "id"],
    )
    op.create_index(
        "idx_article_comments_scope_status",
        "article_comments",
        ["article_id", "parent_id", "status", "id"],
    )
    op.create_index(
        "idx_article_comments_parent_id", "article_comments", ["parent_id"]
    )
    op.create_index(
        "idx_article_comments_author_id", "article_comments", ["author_id"]
    )
    op.create_index(
        "idx_article_comments_deleted_at", "article_comments", ["deleted_at"]
    )

    # ========================================================================
    # ARTICLE COMMENT LIKES table
    # ========================================================================
    op.create_table(
        "article_comment_likes",
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "liked_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["comment_id"], ["article_comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint(
            "comment_id", "user_id", name="pk_article_comment_likes"
        ),
    )
    op.create_index(
        "idx_article_comment_likes_comment_id",
        "article_comment_likes",
        ["comment_id"],
    )

    # ========================================================================
    # TRIGGERS
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_article_comments_updated_at
        BEFORE UPDATE ON article_comments
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute(
        "DROP TRIGGER IF EXISTS update_article_comments_updated_at ON article_comments"
    )
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("article_comment_likes")
    op.drop_table("article_comments")
    op.drop_table("users")
    op.drop_table("assets")
    op.drop_table("asset_files")
