"""Domain layer DI providers."""

from dishka import Scope, provide

from atlas.config import PaginationSettings
from atlas.domain.repository import CommentRepository
from atlas.domain.service import CommentThreadService
from atlas.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_thread_service(
        self,
        comment_repository: CommentRepository,
        pagination: PaginationSettings,
    ) -> CommentThreadService:
        """Provide comment pagination domain service."""
        return CommentThreadService(
            comment_repository=comment_repository,
            max_page_size=pagination.max_page_size,
        )
