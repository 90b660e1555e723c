"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository, InMemoryCommentStore

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommentStore",
]
