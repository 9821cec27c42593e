"""Response schemas for click analytics."""

from pydantic import BaseModel, ConfigDict, Field

from ..models.click import AnalyticsSnapshot


class DailyClicks(BaseModel):
    """Clicks on one calendar day; ``date`` is ISO ``YYYY-MM-DD``."""

    date: str
    clicks: int


class AnalyticsResponse(BaseModel):
    """Response model for link analytics."""

    model_config = ConfigDict(populate_by_name=True)

    total_clicks: int = Field(..., alias="totalClicks")
    clicks_by_day: list[DailyClicks] = Field(..., alias="clicksByDay")

    @classmethod
    def from_snapshot(cls, snapshot: AnalyticsSnapshot) -> "AnalyticsResponse":
        return cls(
            total_clicks=snapshot.total_clicks,
            clicks_by_day=[
                DailyClicks(date=entry.day.isoformat(), clicks=entry.clicks)
                for entry in snapshot.clicks_by_day
            ],
        )
