"""Response schemas for URL Shortener Service."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class ShortenResponse(BaseModel):
    """Response model for created short URL."""

    model_config = ConfigDict(populate_by_name=True)

    short_code: str = Field(..., alias="shortCode")
    short_url: str = Field(..., alias="shortUrl")
    original_url: str = Field(..., alias="originalUrl")
    created_at: datetime = Field(..., alias="createdAt")


class LinkInfoResponse(BaseModel):
    """Response model for URL info."""

    model_config = ConfigDict(populate_by_name=True)

    short_code: str = Field(..., alias="shortCode")
    short_url: str = Field(..., alias="shortUrl")
    original_url: str = Field(..., alias="originalUrl")
    created_at: datetime = Field(..., alias="createdAt")
    total_clicks: int = Field(..., alias="totalClicks")


class StatsResponse(BaseModel):
    """Response model for service-wide counters."""

    model_config = ConfigDict(populate_by_name=True)

    total_links: int = Field(..., alias="totalLinks")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
