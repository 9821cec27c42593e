"""Short code resolution."""

import logging
from datetime import datetime
from typing import Callable, Optional

from ..core.database import Database
from ..core.exceptions import NotFound, StoreUnavailable
from ..models.url import ShortLink
from ..utils.shortener import utc_now, validate_short_code
from .analytics import ClickRecorder

logger = logging.getLogger(__name__)

# Receives a callable and its arguments, e.g. BackgroundTasks.add_task
Scheduler = Callable[..., None]


class ResolutionService:
    """Looks up short codes and records a click for every hit."""

    def __init__(self, db: Database, recorder: Optional[ClickRecorder] = None):
        self.db = db
        self.recorder = recorder or ClickRecorder(db)

    def lookup(self, code: str) -> ShortLink:
        """Get a link without side effects.

        Raises:
            NotFound: The code does not exist.
        """
        if not validate_short_code(code):
            raise NotFound(code)
        record = self.db.get_link(code)
        if record is None:
            raise NotFound(code)
        return ShortLink.from_record(record)

    def resolve(self, code: str, schedule: Optional[Scheduler] = None) -> str:
        """Resolve a code to its target URL and record the click.

        Args:
            code: Short code to resolve.
            schedule: When given, the click is handed to it instead of being
                written before returning.

        Returns:
            Target URL.

        Raises:
            NotFound: The code does not exist; no click is recorded.
        """
        link = self.lookup(code)
        occurred_at = utc_now()
        if schedule is None:
            self.recorder.record(link.code, occurred_at)
        else:
            schedule(self._record_detached, link.code, occurred_at)
        return link.target_url

    def _record_detached(self, code: str, occurred_at: datetime) -> None:
        # Runs after the redirect was sent; the recorder has already logged.
        try:
            self.recorder.record(code, occurred_at)
        except StoreUnavailable:
            logger.error(f"Click for {code} was not stored")
