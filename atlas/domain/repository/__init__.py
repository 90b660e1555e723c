"""Repository interfaces for the comment moderation domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from atlas.domain.repository.comment import CommentRepository

__all__ = [
    "CommentRepository",
]
