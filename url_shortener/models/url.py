"""Pydantic models for URL Shortener Service."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ShortenRequest(BaseModel):
    """Model for creating a short URL."""

    model_config = ConfigDict(populate_by_name=True)

    original_url: str = Field(
        ..., alias="originalUrl", description="The original long URL to shorten"
    )
    custom_code: Optional[str] = Field(
        None, alias="customCode", description="Custom short code"
    )


class ShortLink(BaseModel):
    """A stored mapping from short code to target URL."""

    model_config = ConfigDict(frozen=True)

    code: str
    target_url: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: dict) -> "ShortLink":
        return cls(
            code=record["code"],
            target_url=record["target_url"],
            created_at=datetime.fromisoformat(record["created_at"]),
        )


class ErrorResponse(BaseModel):
    """Model for error responses."""

    error: str
    error_code: Optional[str] = None
