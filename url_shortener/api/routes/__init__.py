"""API routers."""

from .health import router as health_router
from .analytics import router as analytics_router
from .urls import router as urls_router

__all__ = ["health_router", "analytics_router", "urls_router"]
