"""Health check API routes."""

from fastapi import APIRouter, Depends, Response

from ...core.database import Database, get_db
from ...schemas.url import HealthResponse, StatsResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status.
    """
    return {"status": "healthy"}


@router.get("/stats", response_model=StatsResponse, summary="Service statistics")
def service_stats(db: Database = Depends(get_db)) -> StatsResponse:
    """Count of all short links ever created."""
    return StatsResponse(total_links=db.count_links())


@router.get("/favicon.ico", status_code=204, include_in_schema=False)
async def favicon() -> Response:
    return Response(status_code=204)
