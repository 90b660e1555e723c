"""Article comment moderation routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from atlas.application.usecase.comment import (
    CommentPageParams,
    GetChildCommentsRequest,
    GetChildCommentsUseCase,
    GetCommentSegmentRequest,
    GetCommentSegmentUseCase,
    GetCommentStatsUseCase,
    GetRootCommentsRequest,
    GetRootCommentsUseCase,
)
from atlas.domain.model import CommentPage, CommentStats
from atlas.interface.error import HANDLED_ERRORS, to_http_exception

router = APIRouter(
    prefix="/support/article-comments/v1",
    tags=["article-comments"],
    route_class=DishkaRoute,
)


def page_params(
    cursor: Optional[str] = Query(default=None),
    page_size: Optional[str] = Query(default=None, alias="pageSize"),
    sort_key: Optional[str] = Query(default=None, alias="sortKey"),
    sort_dir: Optional[str] = Query(default=None, alias="sortDir"),
    status: Optional[str] = Query(default=None),
    min_likes: Optional[str] = Query(default=None, alias="minLikes"),
    has_replies: Optional[str] = Query(default=None, alias="hasReplies"),
    author_name: Optional[str] = Query(default=None, alias="authorName"),
    search_query: Optional[str] = Query(default=None, alias="searchQuery"),
) -> CommentPageParams:
    """Collect raw page parameters.

    Everything is taken as a string; malformed values fall back to defaults
    in the use case rather than failing validation here.
    """
    return CommentPageParams(
        cursor=cursor,
        page_size=page_size,
        sort_key=sort_key,
        sort_dir=sort_dir,
        status=status,
        min_likes=min_likes,
        has_replies=has_replies,
        author_name=author_name,
        search_query=search_query,
    )


# Declared before the "/{article_id}" routes so "stats" is not taken as an ID
@router.get("/stats", response_model=CommentStats)
async def get_comment_stats(
    get_comment_stats_use_case: FromDishka[GetCommentStatsUseCase],
) -> CommentStats:
    """Moderation dashboard counters over all non-deleted comments."""
    try:
        return await get_comment_stats_use_case.execute()
    except HANDLED_ERRORS as e:
        logfire.warn("Comment stats failed", error=str(e))
        raise to_http_exception(e) from e


@router.get("/{article_id}", response_model=CommentPage)
async def get_root_comments(
    article_id: str,
    get_root_comments_use_case: FromDishka[GetRootCommentsUseCase],
    params: CommentPageParams = Depends(page_params),
) -> CommentPage:
    """Paginate the root comments of an article.

    Args:
        article_id: Article UUID
        get_root_comments_use_case: Use case from DI
        params: Raw page parameters

    Returns:
        Page of root comment nodes, newest first unless ``sortDir`` says otherwise

    Raises:
        HTTPException: 400 for a malformed ID, 503 if the store is unavailable
    """
    try:
        return await get_root_comments_use_case.execute(
            GetRootCommentsRequest(article_id=article_id, params=params)
        )
    except HANDLED_ERRORS as e:
        logfire.warn(
            "Root comments request failed", article_id=article_id, error=str(e)
        )
        raise to_http_exception(e) from e


@router.get("/{article_id}/segment", response_model=CommentPage)
async def get_comment_segment(
    article_id: str,
    get_comment_segment_use_case: FromDishka[GetCommentSegmentUseCase],
    parent_id: Optional[str] = Query(default=None, alias="parentId"),
    params: CommentPageParams = Depends(page_params),
) -> CommentPage:
    """Paginate root comments or the replies to ``parentId``.

    ``parentId`` absent or ``null`` selects root comments. The parent is not
    verified; an unknown parent yields an empty page.
    """
    try:
        return await get_comment_segment_use_case.execute(
            GetCommentSegmentRequest(
                article_id=article_id, parent_id=parent_id, params=params
            )
        )
    except HANDLED_ERRORS as e:
        logfire.warn(
            "Comment segment request failed",
            article_id=article_id,
            parent_id=parent_id,
            error=str(e),
        )
        raise to_http_exception(e) from e


@router.get("/{article_id}/{parent_id}", response_model=CommentPage)
async def get_child_comments(
    article_id: str,
    parent_id: str,
    get_child_comments_use_case: FromDishka[GetChildCommentsUseCase],
    params: CommentPageParams = Depends(page_params),
) -> CommentPage:
    """Paginate the direct replies to a comment.

    Args:
        article_id: Article UUID
        parent_id: Parent comment UUID
        get_child_comments_use_case: Use case from DI
        params: Raw page parameters

    Returns:
        Page of reply nodes, oldest first unless ``sortDir`` says otherwise

    Raises:
        HTTPException: 400 for a malformed ID, 404 if the parent is not a live
            comment of the article, 503 if the store is unavailable
    """
    try:
        return await get_child_comments_use_case.execute(
            GetChildCommentsRequest(
                article_id=article_id, parent_id=parent_id, params=params
            )
        )
    except HANDLED_ERRORS as e:
        logfire.warn(
            "Child comments request failed",
            article_id=article_id,
            parent_id=parent_id,
            error=str(e),
        )
        raise to_http_exception(e) from e
