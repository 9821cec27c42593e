"""Click event and analytics models."""

from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field


class ClickEvent(BaseModel):
    """One recorded resolution of a short code."""

    model_config = ConfigDict(frozen=True)

    code: str
    occurred_at: datetime


class DayCount(BaseModel):
    """Number of clicks on one UTC calendar day."""

    day: date
    clicks: int


class AnalyticsSnapshot(BaseModel):
    """Derived click summary; recomputed on every query."""

    total_clicks: int = 0
    clicks_by_day: list[DayCount] = Field(default_factory=list)
