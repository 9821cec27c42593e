"""Click analytics API routes."""

from fastapi import APIRouter, Depends

from ...models.url import ErrorResponse
from ...schemas.analytics import AnalyticsResponse
from ...services import AnalyticsAggregator
from ..dependencies import get_aggregator

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get(
    "/{short_code}",
    response_model=AnalyticsResponse,
    responses={
        200: {"description": "Click analytics for the short code"},
        404: {"model": ErrorResponse, "description": "Short URL not found"},
    },
    summary="Get click analytics",
    description="Total clicks and clicks per day over the trailing window (UTC days).",
)
def get_analytics(
    short_code: str,
    aggregator: AnalyticsAggregator = Depends(get_aggregator),
) -> AnalyticsResponse:
    """Get click analytics.

    Args:
        short_code: The short URL code.
        aggregator: Analytics aggregator.

    Returns:
        Total clicks and the daily series, oldest day first.
    """
    return AnalyticsResponse.from_snapshot(aggregator.snapshot(short_code))
