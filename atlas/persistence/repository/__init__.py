"""Comment store backed by PostgreSQL.

The in-memory counterpart lives in ``inmemory`` and is wired in by the test
container.
"""

from atlas.persistence.repository.comment import PostgresCommentRepository

__all__ = ["PostgresCommentRepository"]
