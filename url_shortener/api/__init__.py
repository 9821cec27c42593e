"""API package for URL Shortener Service."""

from .routes import health_router, analytics_router, urls_router

__all__ = ["health_router", "analytics_router", "urls_router"]
