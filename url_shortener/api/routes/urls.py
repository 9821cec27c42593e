"""URL shortening API routes.

This module contains all endpoints for URL operations:
- Create short URL (POST /shorten)
- Redirect to original URL (GET /{short_code})
- Get URL info (GET /{short_code}/info)
"""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import RedirectResponse

from ...models.url import ShortenRequest, ErrorResponse
from ...schemas.url import ShortenResponse, LinkInfoResponse
from ...services import AnalyticsAggregator, CodeGenerator, ResolutionService
from ...utils.shortener import create_short_url, redirect_location
from ..dependencies import get_aggregator, get_generator, get_resolver

router = APIRouter(prefix="", tags=["URLs"])


def get_base_url(request: Request) -> str:
    """Get base URL from request.

    Args:
        request: FastAPI request object.

    Returns:
        Base URL string.
    """
    return str(request.base_url).rstrip("/")


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=201,
    responses={
        201: {"description": "Short URL created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid URL or custom code"},
        409: {"model": ErrorResponse, "description": "Short code already exists"},
        503: {"model": ErrorResponse, "description": "No short code could be stored"},
    },
    summary="Create a short URL",
    description="Create a new short URL from a long URL. Optionally specify a custom code.",
)
def create_short_url_endpoint(
    request: Request,
    payload: ShortenRequest,
    generator: CodeGenerator = Depends(get_generator),
) -> ShortenResponse:
    """Create a short URL from a long URL.

    Args:
        request: FastAPI request object.
        payload: URL creation data.
        generator: Code generator bound to the link store.

    Returns:
        Created URL information.
    """
    link = generator.create(payload.original_url, payload.custom_code)

    return ShortenResponse(
        short_code=link.code,
        short_url=create_short_url(get_base_url(request), link.code),
        original_url=link.target_url,
        created_at=link.created_at,
    )


@router.get(
    "/{short_code}/info",
    response_model=LinkInfoResponse,
    responses={
        200: {"description": "URL information retrieved"},
        404: {"model": ErrorResponse, "description": "Short URL not found"},
    },
    summary="Get URL information",
    description="Get information about a short URL without counting a click.",
)
def get_url_info(
    short_code: str,
    request: Request,
    resolver: ResolutionService = Depends(get_resolver),
    aggregator: AnalyticsAggregator = Depends(get_aggregator),
) -> LinkInfoResponse:
    """Get URL information.

    Args:
        short_code: The short URL code.
        request: FastAPI request object.
        resolver: Resolution service.
        aggregator: Analytics aggregator.

    Returns:
        URL information.
    """
    link = resolver.lookup(short_code)
    snapshot = aggregator.snapshot(short_code)

    return LinkInfoResponse(
        short_code=link.code,
        short_url=create_short_url(get_base_url(request), link.code),
        original_url=link.target_url,
        created_at=link.created_at,
        total_clicks=snapshot.total_clicks,
    )


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=302,
    responses={
        302: {"description": "Redirect to original URL"},
        404: {"model": ErrorResponse, "description": "Short URL not found"},
    },
    summary="Redirect to original URL",
    description="Redirect to the original URL associated with the short code.",
)
def redirect_to_url(
    short_code: str,
    background_tasks: BackgroundTasks,
    resolver: ResolutionService = Depends(get_resolver),
) -> RedirectResponse:
    """Redirect to the original URL.

    The click is recorded after the redirect has been sent.

    Args:
        short_code: The short URL code.
        background_tasks: Tasks run once the response is out.
        resolver: Resolution service.

    Returns:
        Redirect response to original URL.
    """
    target_url = resolver.resolve(short_code, schedule=background_tasks.add_task)
    return RedirectResponse(url=redirect_location(target_url), status_code=302)
