"""Schemas package for URL Shortener Service."""

from .url import (
    ShortenResponse,
    LinkInfoResponse,
    StatsResponse,
    HealthResponse,
)
from .analytics import DailyClicks, AnalyticsResponse

__all__ = [
    "ShortenResponse",
    "LinkInfoResponse",
    "StatsResponse",
    "HealthResponse",
    "DailyClicks",
    "AnalyticsResponse",
]
