"""Get comment stats use case."""

from atlas.application.usecase.base import BaseUseCase
from atlas.domain.model import CommentStats
from atlas.domain.service import CommentThreadService


class GetCommentStatsUseCase(BaseUseCase):
    """Use case for the moderation dashboard counters."""

    def __init__(self, comment_thread_service: CommentThreadService) -> None:
        """Initialize get comment stats use case.

        Args:
            comment_thread_service: Comment pagination service
        """
        self.comment_thread_service = comment_thread_service

    async def execute(self, request: None = None) -> CommentStats:
        """Execute get comment stats flow.

        Returns:
            Counters over all non-deleted comments
        """
        return await self.comment_thread_service.get_stats()
