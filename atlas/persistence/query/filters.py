"""Compilation of comment filters into SQL predicates."""

from sqlalchemy import ColumnElement, Subquery

from atlas.domain.value import ANY_STATUS, CommentFilters, CommentScope


def compile_scope(scope: CommentScope, enriched: Subquery) -> list[ColumnElement[bool]]:
    """Terms fixing the article and the parent (or root level)."""
    terms: list[ColumnElement[bool]] = [enriched.c.article_id == scope.article_id]
    if scope.is_root:
        terms.append(enriched.c.parent_id.is_(None))
    else:
        terms.append(enriched.c.parent_id == scope.parent_id)
    return terms


def compile_filters(
    filters: CommentFilters,
    scope: CommentScope,
    enriched: Subquery,
) -> list[ColumnElement[bool]]:
    """Compile scope and caller filters into a conjunction of terms.

    Terms reference the enriched relation, so ``likes`` and ``reply_count``
    are the same derivations that are returned, and author name is only
    matched after the author join.

    Tombstoned comments are always excluded; there is no opt-in.

    Args:
        filters: Normalized caller filters
        scope: Article and parent being paginated
        enriched: Relation built by ``enriched_comments``

    Returns:
        Predicate terms to AND together
    """
    terms = compile_scope(scope, enriched)
    terms.append(enriched.c.deleted_at.is_(None))

    if filters.status != ANY_STATUS:
        terms.append(enriched.c.status == filters.status.value)

    if filters.min_likes is not None:
        terms.append(enriched.c.likes >= filters.min_likes)

    if filters.has_replies is True:
        terms.append(enriched.c.reply_count > 0)
    elif filters.has_replies is False:
        terms.append(enriched.c.reply_count == 0)

    if filters.author_name:
        terms.append(
            enriched.c.author_name.icontains(filters.author_name, autoescape=True)
        )

    if filters.search_query:
        terms.append(
            enriched.c.content.icontains(filters.search_query, autoescape=True)
        )

    return terms
