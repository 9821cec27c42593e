"""Click recording and aggregation."""

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from ..core.config import settings
from ..core.database import Database
from ..core.exceptions import NotFound, StoreUnavailable
from ..models.click import AnalyticsSnapshot, ClickEvent, DayCount
from ..utils.shortener import to_timestamp, utc_now

logger = logging.getLogger(__name__)


class ClickRecorder:
    """Appends click events to the log."""

    def __init__(self, db: Database):
        self.db = db

    def record(self, code: str, occurred_at: Optional[datetime] = None) -> ClickEvent:
        """Append one click event.

        Args:
            code: Short code that was resolved.
            occurred_at: Time of the resolution. Defaults to now (UTC).

        Returns:
            The recorded event.

        Raises:
            NotFound: The link does not exist.
            StoreUnavailable: The event could not be written.
        """
        event = ClickEvent(code=code, occurred_at=occurred_at or utc_now())
        try:
            self.db.insert_click(event.code, to_timestamp(event.occurred_at))
        except StoreUnavailable:
            logger.error(f"Failed to record click for {code} at {event.occurred_at.isoformat()}")
            raise
        return event


class AnalyticsAggregator:
    """Reduces a link's click log to a total and a daily series."""

    def __init__(self, db: Database, window_days: Optional[int] = None):
        self.db = db
        self.window_days = (
            window_days if window_days is not None else settings.analytics_window_days
        )
        if self.window_days < 1:
            raise ValueError(f"window_days must be positive, got {self.window_days}")

    def window(self, now: Optional[datetime] = None) -> tuple[datetime, datetime]:
        """Return the UTC bounds ``[start, end)`` of the trailing window.

        The window covers whole calendar days: today and the
        ``window_days - 1`` days before it.
        """
        now = now or utc_now()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        today = now.astimezone(timezone.utc).date()
        start = today - timedelta(days=self.window_days - 1)
        end = today + timedelta(days=1)
        return _midnight(start), _midnight(end)

    def snapshot(self, code: str, now: Optional[datetime] = None) -> AnalyticsSnapshot:
        """Summarize clicks for a code.

        Args:
            code: Short code.
            now: Reference time for the window. Defaults to now (UTC).

        Returns:
            All-time total and per-day counts for days with clicks,
            oldest day first.

        Raises:
            NotFound: The code does not exist.
        """
        start, end = self.window(now)
        summary = self.db.click_summary(code, to_timestamp(start), to_timestamp(end))
        if summary is None:
            raise NotFound(code)
        total, rows = summary
        return AnalyticsSnapshot(
            total_clicks=total,
            clicks_by_day=[
                DayCount(day=date.fromisoformat(row["day"]), clicks=row["clicks"])
                for row in rows
            ],
        )


def _midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)
