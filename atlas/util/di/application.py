"""Application layer DI providers."""

from dishka import Scope, provide

from atlas.application.usecase.comment import (
    GetChildCommentsUseCase,
    GetCommentSegmentUseCase,
    GetCommentStatsUseCase,
    GetRootCommentsUseCase,
)
from atlas.config import PaginationSettings
from atlas.domain.service import CommentThreadService
from atlas.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_root_comments_use_case(
        self,
        comment_thread_service: CommentThreadService,
        pagination: PaginationSettings,
    ) -> GetRootCommentsUseCase:
        """Provide get root comments use case."""
        return GetRootCommentsUseCase(
            comment_thread_service=comment_thread_service, pagination=pagination
        )

    @provide(scope=Scope.REQUEST)
    def get_child_comments_use_case(
        self,
        comment_thread_service: CommentThreadService,
        pagination: PaginationSettings,
    ) -> GetChildCommentsUseCase:
        """Provide get child comments use case."""
        return GetChildCommentsUseCase(
            comment_thread_service=comment_thread_service, pagination=pagination
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_segment_use_case(
        self,
        comment_thread_service: CommentThreadService,
        pagination: PaginationSettings,
    ) -> GetCommentSegmentUseCase:
        """Provide get comment segment use case."""
        return GetCommentSegmentUseCase(
            comment_thread_service=comment_thread_service, pagination=pagination
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_stats_use_case(
        self, comment_thread_service: CommentThreadService
    ) -> GetCommentStatsUseCase:
        """Provide get comment stats use case."""
        return GetCommentStatsUseCase(comment_thread_service=comment_thread_service)
