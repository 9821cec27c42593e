"""Models package for URL Shortener Service."""

from .url import ShortenRequest, ShortLink, ErrorResponse
from .click import ClickEvent, DayCount, AnalyticsSnapshot

__all__ = [
    "ShortenRequest",
    "ShortLink",
    "ErrorResponse",
    "ClickEvent",
    "DayCount",
    "AnalyticsSnapshot",
]
