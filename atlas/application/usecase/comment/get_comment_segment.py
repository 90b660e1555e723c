"""Get comment segment use case."""

from typing import Optional

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

# The UI sends the literal string "null" to ask for root comments
NULL_PARENT = "null"


class GetCommentSegmentRequest(BaseModel):
    """Get comment segment request."""

    article_id: str  # UUID string
    parent_id: Optional[str] = None  # UUID string, "null" or absent for root
    params: CommentPageParams = CommentPageParams()


class GetCommentSegmentUseCase(BaseUseCase):
    """Use case for paginating either level of a thread from one endpoint.

    Unlike the children use case, the parent is not verified: an unknown
    parent simply yields an empty page.
    """

    def __init__(
        self,
        comment_thread_service: CommentThreadService,
        pagination: PaginationSettings,
    ) -> None:
        self.comment_thread_service = comment_thread_service
        self.pagination = pagination

    async def execute(self, request: GetCommentSegmentRequest) -> CommentPage:
        article_id = ArticleId(parse_uuid(request.article_id, "article"))

        raw_parent = (request.parent_id or "").strip()
        if not raw_parent or raw_parent.lower() == NULL_PARENT:
            scope = CommentScope.root(article_id)
        else:
            parent_id = CommentId(parse_uuid(raw_parent, "parent comment"))
            scope = CommentScope.children_of(article_id, parent_id)

        query = to_comment_query(request.params, self.pagination)
        return await self.comment_thread_service.fetch_page(query=query, scope=scope)
