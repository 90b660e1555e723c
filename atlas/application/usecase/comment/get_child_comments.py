"""Get child comments use case."""

from pydantic import BaseModel

from atlas.application.usecase.base import BaseUseCase
from atlas.application.usecase.comment.query_params import (
    CommentPageParams,
    to_comment_query,
)
from atlas.config import PaginationSettings
from atlas.domain.model import CommentPage
from atlas.domain.service import CommentThreadService
from atlas.domain.value import ArticleId, CommentId, CommentScope, parse_uuid


class GetChildCommentsRequest(BaseModel):
    """Get child comments request."""

    article_id: str  # UUID string
    parent_id: str  # UUID string
    params: CommentPageParams = CommentPageParams()


class GetChildCommentsUseCase(BaseUseCase):
    """Use case for paginating the direct replies to a comment."""

    def __init__(
        self,
        comment_thread_service: CommentThreadService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize get child comments use case.

        Args:
            comment_thread_service: Comment pagination service
            pagination: Page size defaults and cap
        """
        self.comment_thread_service = comment_thread_service
        self.pagination = pagination

    async def execute(self, request: GetChildCommentsRequest) -> CommentPage:
        """Execute get child comments flow.

        Both IDs are validated before the store is touched, then the parent
        is checked to be a live comment of the same article.

        Args:
            request: Article ID, parent comment ID and raw page parameters

        Returns:
            Page of reply nodes

        Raises:
            InvalidIdentifierError: If either ID is malformed
            NotFoundError: If the parent is missing, deleted or elsewhere
        """
        article_id = ArticleId(parse_uuid(request.article_id, "article"))
        parent_id = CommentId(parse_uuid(request.parent_id, "parent comment"))
        query = to_comment_query(request.params, self.pagination)

        await self.comment_thread_service.verify_parent(article_id, parent_id)

        return await self.comment_thread_service.fetch_page(
            query=query,
            scope=CommentScope.children_of(article_id, parent_id),
        )
