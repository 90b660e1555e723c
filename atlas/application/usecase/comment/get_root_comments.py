"""Get root comments use case."""

from pydantic import BaseModel

from atlas.application.usecase.base import BaseUseCase
from atlas.application.usecase.comment.query_params import (
    CommentPageParams,
    to_comment_query,
)
from atlas.config import PaginationSettings
from atlas.domain.model import CommentPage
from atlas.domain.service import CommentThreadService
from atlas.domain.value import ArticleId, CommentScope, parse_uuid


class GetRootCommentsRequest(BaseModel):
    """Get root comments request."""

    article_id: str  # UUID string
    params: CommentPageParams = CommentPageParams()


class GetRootCommentsUseCase(BaseUseCase):
    """Use case for paginating the root comments of an article."""

    def __init__(
        self,
        comment_thread_service: CommentThreadService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize get root comments use case.

        Args:
            comment_thread_service: Comment pagination service
            pagination: Page size defaults and cap
        """
        self.comment_thread_service = comment_thread_service
        self.pagination = pagination

    async def execute(self, request: GetRootCommentsRequest) -> CommentPage:
        """Execute get root comments flow.

        Args:
            request: Article ID and raw page parameters

        Returns:
            Page of root comment nodes

        Raises:
            InvalidIdentifierError: If the article ID is malformed
        """
        article_id = ArticleId(parse_uuid(request.article_id, "article"))
        query = to_comment_query(request.params, self.pagination)

        return await self.comment_thread_service.fetch_page(
            query=query,
            scope=CommentScope.root(article_id),
        )
