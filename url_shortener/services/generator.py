"""Short code allocation.

Codes are claimed by inserting them: the link store's unique key decides
which of two racing requests wins, and a generated code that loses is
simply redrawn.
"""

import logging
from typing import Callable, Optional

from ..core.config import settings
from ..core.database import Database
from ..core.exceptions import AliasTaken, AlreadyExists, GenerationExhausted
from ..models.url import ShortLink
from ..utils.shortener import (
    generate_short_code,
    is_reserved,
    to_timestamp,
    utc_now,
    validate_custom_code,
    validate_target_url,
)

logger = logging.getLogger(__name__)


class CodeGenerator:
    """Creates short links, either from a custom alias or a random draw."""

    def __init__(
        self,
        db: Database,
        code_factory: Optional[Callable[[], str]] = None,
        max_attempts: Optional[int] = None,
    ):
        """Initialize the generator.

        Args:
            db: Link store to claim codes in.
            code_factory: Returns a fresh candidate code on every call.
                Defaults to a base62 draw of the configured length.
            max_attempts: Consecutive collisions tolerated before giving up.
        """
        self.db = db
        self.code_factory = code_factory or generate_short_code
        self.max_attempts = (
            max_attempts if max_attempts is not None else settings.max_generation_attempts
        )
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")

    def create(self, target_url: str, custom_code: Optional[str] = None) -> ShortLink:
        """Create a short link.

        Args:
            target_url: Absolute http/https URL to redirect to.
            custom_code: Optional caller-chosen alias.

        Returns:
            The committed ShortLink.

        Raises:
            InvalidUrl: ``target_url`` is not an http/https URL.
            InvalidAlias: ``custom_code`` is malformed or reserved.
            AliasTaken: ``custom_code`` already exists.
            GenerationExhausted: No free code was drawn in ``max_attempts`` tries.
        """
        target_url = validate_target_url(target_url)
        if custom_code is not None:
            code = validate_custom_code(custom_code)
            try:
                return self._claim(code, target_url)
            except AlreadyExists as e:
                raise AliasTaken("Custom code already exists") from e

        for attempt in range(1, self.max_attempts + 1):
            code = self.code_factory()
            if is_reserved(code):
                continue
            try:
                return self._claim(code, target_url)
            except AlreadyExists:
                logger.debug(f"Collision on generated code {code} (attempt {attempt})")

        logger.error(f"No free short code after {self.max_attempts} attempts")
        raise GenerationExhausted("Failed to generate unique short code")

    def _claim(self, code: str, target_url: str) -> ShortLink:
        record = self.db.insert_link(code, target_url, to_timestamp(utc_now()))
        return ShortLink.from_record(record)
