"""Liveness route."""

from datetime import datetime, timezone
from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from atlas.config import PaginationSettings, Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Process liveness and build information."""

    status: Literal["healthy"] = "healthy"
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    max_page_size: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    pagination: FromDishka[PaginationSettings],
) -> HealthResponse:
    """Report that the process serves requests.

    The comment store is not contacted; a store outage shows up as 503s on
    the comment routes instead.
    """
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        git_sha=settings.git_sha,
        environment=settings.environment,
        max_page_size=pagination.max_page_size,
    )
