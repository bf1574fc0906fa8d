"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from votp.config import Settings
from votp.domain.value import TrackingPolicy

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    tracking_policy: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], tracking_policy: FromDishka[TrackingPolicy]
) -> HealthResponse:
    """Basic health check endpoint.

    Reports the active tracking policy version, since grouping keys depend
    on it.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        tracking_policy=tracking_policy.version.value,
    )
