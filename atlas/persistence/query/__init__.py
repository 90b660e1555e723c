"""SQL building blocks for comment windows."""

from atlas.persistence.query.enrichment import (
    AUTHOR_JOIN_PLAN,
    JoinStep,
    author_preview,
    enriched_comments,
    run_join_plan,
)
from atlas.persistence.query.filters import compile_filters, compile_scope
from atlas.persistence.query.range import build_range_predicate, order_by_clauses

__all__ = [
    "AUTHOR_JOIN_PLAN",
    "JoinStep",
    "author_preview",
    "build_range_predicate",
    "compile_filters",
    "compile_scope",
    "enriched_comments",
    "order_by_clauses",
    "run_join_plan",
]
