"""Author enrichment for comment windows.

The author preview is resolved through a chain of optional joins::

    comment.author_id -> users.id
    users.avatar_asset_id -> assets.id
    assets.file_id -> asset_files.id

The chain is data (``AUTHOR_JOIN_PLAN``). The same plan drives the SQL
builder and the in-memory runner, so both resolve a missing hop the same
way: every later hop, and ``avatar_url``, comes back as ``None``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from sqlalchemy import Subquery, Table, func, select

from atlas.domain.model import AuthorPreview
from atlas.persistence.tables import (
    article_comment_likes_table,
    article_comments_table,
    asset_files_table,
    assets_table,
    users_table,
)

ROOT_ALIAS = "comment"
ENRICHED_ALIAS = "enriched"


@dataclass(frozen=True)
class JoinStep:
    """One optional hop: ``source.source_field -> target.target_field``."""

    alias: str
    source: str
    source_field: str
    target: str
    target_field: str = "id"


AUTHOR_JOIN_PLAN: tuple[JoinStep, ...] = (
    JoinStep(
        alias="author", source=ROOT_ALIAS, source_field="author_id", target="users"
    ),
    JoinStep(
        alias="avatar_asset",
        source="author",
        source_field="avatar_asset_id",
        target="assets",
    ),
    JoinStep(
        alias="avatar_file",
        source="avatar_asset",
        source_field="file_id",
        target="asset_files",
    ),
)

JOIN_TARGETS: dict[str, Table] = {
    "users": users_table,
    "assets": assets_table,
    "asset_files": asset_files_table,
}


def enriched_comments(plan: tuple[JoinStep, ...] = AUTHOR_JOIN_PLAN) -> Subquery:
    """Build the enriched comment relation.

    Columns are the comment columns plus ``likes``, ``reply_count``,
    ``author_ref``, ``author_name``, ``author_role`` and ``avatar_url``.
    Filters, range predicates and ordering are applied on top of it, so
    derived counts and author fields are filtered exactly as they are
    returned.

    Args:
        plan: Join steps to apply, in dependency order

    Returns:
        Aliased subquery named ``enriched``
    """
    comment = article_comments_table.alias(ROOT_ALIAS)
    relations: dict[str, Any] = {ROOT_ALIAS: comment}
    joined: Any = comment

    for step in plan:
        target = JOIN_TARGETS[step.target].alias(step.alias)
        source = relations[step.source]
        joined = joined.outerjoin(
            target, source.c[step.source_field] == target.c[step.target_field]
        )
        relations[step.alias] = target

    # Like count is derived from like records, never stored
    likes = (
        select(func.count())
        .select_from(article_comment_likes_table)
        .where(article_comment_likes_table.c.comment_id == comment.c.id)
        .scalar_subquery()
    )

    # Replies are live direct children; tombstoned replies do not count
    child = article_comments_table.alias("child")
    reply_count = (
        select(func.count())
        .select_from(child)
        .where(child.c.parent_id == comment.c.id)
        .where(child.c.deleted_at.is_(None))
        .scalar_subquery()
    )

    author = relations["author"]
    avatar_file = relations["avatar_file"]

    stmt = select(
        comment.c.id,
        comment.c.article_id,
        comment.c.parent_id,
        comment.c.author_id,
        comment.c.content,
        comment.c.status,
        comment.c.created_at,
        comment.c.updated_at,
        comment.c.deleted_at,
        likes.label("likes"),
        reply_count.label("reply_count"),
        author.c.id.label("author_ref"),
        author.c.name.label("author_name"),
        author.c.role.label("author_role"),
        avatar_file.c.public_url.label("avatar_url"),
    ).select_from(joined)

    return stmt.subquery(ENRICHED_ALIAS)


def run_join_plan(
    root: Any,
    lookup: Callable[[str, str, Any], Optional[Any]],
    plan: tuple[JoinStep, ...] = AUTHOR_JOIN_PLAN,
) -> dict[str, Optional[Any]]:
    """Resolve a join plan against in-memory records.

    Args:
        root: The comment record
        lookup: ``(target, target_field, key) -> record or None``
        plan: Join steps to apply, in dependency order

    Returns:
        Mapping of alias to resolved record (None where a hop is missing)
    """
    resolved: dict[str, Optional[Any]] = {ROOT_ALIAS: root}
    for step in plan:
        source = resolved.get(step.source)
        key = getattr(source, step.source_field, None) if source is not None else None
        resolved[step.alias] = (
            lookup(step.target, step.target_field, key) if key is not None else None
        )
    return resolved


def author_preview(resolved: Mapping[str, Optional[Any]]) -> Optional[AuthorPreview]:
    """Collapse resolved author records into a flat preview."""
    author = resolved.get("author")
    if author is None:
        return None

    avatar_file = resolved.get("avatar_file")
    return AuthorPreview(
        id=author.id,
        name=author.name,
        role=author.role,
        avatar_url=avatar_file.public_url if avatar_file is not None else None,
    )
